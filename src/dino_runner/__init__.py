"""
dino_runner: an endless runner. Jump the obstacles, survive for score.
"""

from .config import GameConfig
from .data_models import Character, GameState, Intent, Obstacle, Phase
from .simulation import Simulation

__all__ = ["GameConfig", "Character", "GameState", "Intent", "Obstacle", "Phase", "Simulation"]
__version__ = "0.1.0"
