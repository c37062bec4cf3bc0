"""
simulation.py: The game loop state machine.

advance() is the pure transition (GameState in, GameState out); Simulation
wraps it with the current state, queued intents and the random source.
"""

import logging
import random
from typing import Optional

from .config import GameConfig
from .data_models import GameState, Intent, Phase
from .obstacles import ObstacleManager
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


class Simulation:
    """
    Owns the game state exclusively. Renderers read snapshots,
    input sources hand in intents; neither mutates state directly.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.physics = PhysicsCore(self.config)
        self.obstacle_manager = ObstacleManager(self.config, rng)
        self.state = GameState.initial(self.config)
        self.pending_jump = False

    @property
    def running(self) -> bool:
        """Whether ticks should keep being scheduled."""
        return self.state.active

    def advance(self, state: GameState, jump: bool = False) -> GameState:
        """
        Computes the state one tick after `state`.
        Collision is evaluated on the incoming snapshot, before this
        tick's movement is applied.
        """
        if not state.active:
            return state

        character = self.physics.step_character(state.character, jump)
        obstacles = self.obstacle_manager.step(state.obstacles)
        hit = self.physics.check_collision(state.character, state.obstacles)

        return GameState(
            character=character,
            obstacles=obstacles,
            score=state.score + self.config.score_per_tick,
            phase=Phase.OVER if hit else Phase.ACTIVE,
            tick=state.tick + 1,
        )

    def tick(self) -> GameState:
        """Runs one tick with any queued jump. No-op while the game is over."""
        if not self.running:
            return self.state

        jump, self.pending_jump = self.pending_jump, False
        self.state = self.advance(self.state, jump)

        if not self.state.active:
            logger.info(f"Game over at tick {self.state.tick}. Final score: {self.state.score}")
        return self.state

    def handle_intent(self, intent: Intent) -> bool:
        """Applies an intent if it is valid now. Returns whether it was accepted."""
        if intent is Intent.JUMP:
            if self.state.active and not self.state.character.airborne:
                self.pending_jump = True
                return True
        elif intent is Intent.RESTART:
            if not self.state.active:
                self.restart()
                return True

        logger.debug(f"Ignored {intent.name} intent in phase {self.state.phase.name}")
        return False

    def restart(self):
        self.state = GameState.initial(self.config)
        self.pending_jump = False
        logger.info("Game restarted")

    def snapshot(self) -> dict:
        return self.state.to_snapshot()

