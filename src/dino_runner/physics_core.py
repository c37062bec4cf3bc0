"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Iterable, Optional

from .config import GameConfig
from .data_models import Character, Obstacle


class PhysicsCore:
    """
    Vertical motion of the character and its overlap test against obstacles.
    All methods are pure: they return new values and never mutate their inputs.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def jump(self) -> float:
        """Returns the instantaneous velocity after a jump."""
        return self.config.jump_velocity

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float, bool]:
        """
        Advances one tick. Returns (y, velocity, airborne).
        Landing clamps to the ground line and discards any overshoot.
        """
        next_y = y + velocity
        if next_y >= self.config.ground_y:
            return self.config.ground_y, 0.0, False
        return next_y, velocity + self.config.gravity, True

    def step_character(self, character: Character, jump: bool = False) -> Character:
        """Single-tick update. A jump is only honored while grounded."""
        velocity = character.velocity
        if jump and not character.airborne:
            velocity = self.jump()

        y, velocity, airborne = self.apply_gravity_and_movement(character.y, velocity)
        return Character(y=y, velocity=velocity, airborne=airborne)

    def collides(self, character: Character, obstacle: Obstacle) -> bool:
        cfg = self.config
        return (
            obstacle.x < cfg.character_x + cfg.character_width
            and obstacle.x + cfg.obstacle_width > cfg.character_x
            and character.y + cfg.character_height > obstacle.y
        )

    def check_collision(self, character: Character, obstacles: Iterable[Obstacle]) -> bool:
        """True as soon as any obstacle overlaps the character."""
        return any(self.collides(character, ob) for ob in obstacles)
