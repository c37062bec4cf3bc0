"""
obstacles.py: Scrolling, culling and spawning of ground obstacles.
"""

import logging
import random
from typing import Optional, Tuple

from .config import GameConfig
from .data_models import Obstacle

logger = logging.getLogger(__name__)


def random_gap(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Uniform integer in [low, high], both ends inclusive."""
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    return (rng or random).randint(low, high)


class ObstacleManager:
    """Moves the obstacle row left and keeps it populated."""

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

    def _spawn_obstacle(self) -> Obstacle:
        """Generates a new obstacle off-screen to the right."""
        jitter = random_gap(self.config.jitter_min, self.config.jitter_max, self.rng)
        obstacle = Obstacle(x=self.config.field_width + jitter, y=self.config.ground_y)
        logger.debug(f"Spawned obstacle at x={obstacle.x}")
        return obstacle

    def needs_spawn(self, obstacles: Tuple[Obstacle, ...]) -> bool:
        # Only the rightmost obstacle is checked
        return not obstacles or obstacles[-1].x < self.config.spawn_threshold

    def step(self, obstacles: Tuple[Obstacle, ...]) -> Tuple[Obstacle, ...]:
        """
        One tick: shift, drop the ones fully off the left edge,
        then append at most one new obstacle.
        """
        speed = self.config.obstacle_speed
        width = self.config.obstacle_width

        moved = tuple(Obstacle(x=ob.x - speed, y=ob.y) for ob in obstacles)
        kept = tuple(ob for ob in moved if ob.x + width > 0)

        if self.needs_spawn(kept):
            kept += (self._spawn_obstacle(),)
        return kept
