"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .config import GameConfig


class Phase(Enum):
    """Whether the run is still going."""
    ACTIVE = "active"
    OVER = "over"


class Intent(Enum):
    """Discrete user actions, decoupled from raw key events."""
    JUMP = "jump"
    RESTART = "restart"


@dataclass(frozen=True)
class Character:
    """The runner. y is the top edge in screen coordinates (grows downward)."""
    y: float
    velocity: float = 0.0
    airborne: bool = False


@dataclass(frozen=True)
class Obstacle:
    """A ground-standing block drifting left."""
    x: float
    y: float


@dataclass(frozen=True)
class GameState:
    """Everything a tick reads and writes."""
    character: Character
    obstacles: Tuple[Obstacle, ...]
    score: int = 0
    phase: Phase = Phase.ACTIVE
    tick: int = 0

    @classmethod
    def initial(cls, config: GameConfig) -> "GameState":
        """Grounded character, one far-off obstacle, zero score."""
        return cls(
            character=Character(y=config.ground_y),
            obstacles=(Obstacle(
                x=config.field_width + config.initial_obstacle_offset,
                y=config.ground_y,
            ),),
        )

    @property
    def active(self) -> bool:
        return self.phase is Phase.ACTIVE

    def to_snapshot(self) -> dict:
        """Prepares a read-only view of the state for the renderer."""
        return {
            "y": self.character.y,
            "velocity": self.character.velocity,
            "airborne": self.character.airborne,
            "obstacles": [ob.x for ob in self.obstacles],
            "score": self.score,
            "phase": self.phase.value,
            "tick": self.tick,
        }


@dataclass(frozen=True)
class Snapshot:
    """Renderer-side copy of a snapshot dictionary."""
    y: float
    obstacles: Tuple[float, ...] = ()
    score: int = 0
    game_over: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Snapshot":
        """Rebuilds the renderer view from GameState.to_snapshot() output."""
        return cls(
            y=data["y"],
            obstacles=tuple(data["obstacles"]),
            score=data["score"],
            game_over=data["phase"] == Phase.OVER.value,
        )
