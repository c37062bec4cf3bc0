"""
config.py: Tunable game parameters, defaulting to the values in constants.py.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import (
    FPS, FIELD_WIDTH, FIELD_HEIGHT, GROUND_Y,
    CHARACTER_X, CHARACTER_WIDTH, CHARACTER_HEIGHT,
    GRAVITY, JUMP_VELOCITY,
    OBSTACLE_WIDTH, OBSTACLE_HEIGHT, OBSTACLE_SPEED, OBSTACLE_GAP,
    OBSTACLE_JITTER_MIN, OBSTACLE_JITTER_MAX, INITIAL_OBSTACLE_OFFSET,
    SCORE_PER_TICK,
)


class GameConfig(BaseModel):
    """Every constant the simulation and renderer read, overridable per game."""

    model_config = ConfigDict(frozen=True)

    fps: int = Field(default=FPS, gt=0)
    field_width: int = Field(default=FIELD_WIDTH, gt=0)
    field_height: int = Field(default=FIELD_HEIGHT, gt=0)
    ground_y: float = Field(default=GROUND_Y, gt=0)

    character_x: float = Field(default=CHARACTER_X, ge=0)
    character_width: float = Field(default=CHARACTER_WIDTH, gt=0)
    character_height: float = Field(default=CHARACTER_HEIGHT, gt=0)

    gravity: float = Field(default=GRAVITY, gt=0)
    jump_velocity: float = Field(default=JUMP_VELOCITY, lt=0)  # Negative is upward

    obstacle_width: float = Field(default=OBSTACLE_WIDTH, gt=0)
    obstacle_height: float = Field(default=OBSTACLE_HEIGHT, gt=0)
    obstacle_speed: float = Field(default=OBSTACLE_SPEED, gt=0)
    obstacle_gap: float = Field(default=OBSTACLE_GAP, ge=0)
    jitter_min: int = Field(default=OBSTACLE_JITTER_MIN, ge=0)
    jitter_max: int = Field(default=OBSTACLE_JITTER_MAX, ge=0)
    initial_obstacle_offset: float = Field(default=INITIAL_OBSTACLE_OFFSET, ge=0)

    score_per_tick: int = Field(default=SCORE_PER_TICK, gt=0)

    @model_validator(mode="after")
    def _check_geometry(self) -> "GameConfig":
        if self.jitter_min > self.jitter_max:
            raise ValueError(
                f"jitter range is empty: [{self.jitter_min}, {self.jitter_max}]")
        if self.obstacle_gap >= self.field_width:
            raise ValueError(
                f"obstacle_gap ({self.obstacle_gap}) must be smaller than field_width ({self.field_width})")
        if self.ground_y > self.field_height - self.character_height:
            raise ValueError(
                f"ground_y ({self.ground_y}) leaves the character below the field")
        return self

    @property
    def spawn_threshold(self) -> float:
        """x below which the rightmost obstacle triggers a new spawn."""
        return self.field_width - self.obstacle_gap
