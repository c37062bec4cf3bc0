"""
runner_client.py

pygame window: turns key presses into intents, ticks the simulation
and renders its snapshots.
"""

import logging
from typing import List, Optional

import pygame

from .config import GameConfig
from .constants import TICK_TIME, MAX_TICKS_PER_FRAME
from .data_models import Intent, Snapshot
from .simulation import Simulation

logger = logging.getLogger(__name__)

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)

# -------- Colors --------
BACKGROUND = (247, 247, 247)
BORDER = (34, 34, 34)
CHARACTER_COLOR = (34, 34, 34)
OBSTACLE_COLOR = (76, 175, 80)
GROUND_COLOR = (136, 136, 136)
TEXT_COLOR = (34, 34, 34)
HINT_COLOR = (85, 85, 85)
PANEL_COLOR = (255, 255, 255)
GROUND_THICKNESS = 4


def intent_for_event(event: pygame.event.Event, game_over: bool) -> Optional[Intent]:
    """Maps one key-down event to an intent. The jump key restarts once the game is over."""
    if event.type != pygame.KEYDOWN or event.key not in JUMP_KEYS:
        return None
    return Intent.RESTART if game_over else Intent.JUMP


def is_quit_event(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


class Renderer:
    """Paints snapshots. Holds fonts only; never touches game state."""

    def __init__(self, config: GameConfig):
        pygame.font.init()
        self.config = config
        self.large_font = pygame.font.Font(None, 36)
        self.font = pygame.font.Font(None, 24)

    def character_rect(self, y: float) -> pygame.Rect:
        cfg = self.config
        return pygame.Rect(
            int(cfg.character_x), int(y), int(cfg.character_width), int(cfg.character_height))

    def obstacle_rect(self, x: float) -> pygame.Rect:
        # Obstacles stand on the bottom edge of the field
        cfg = self.config
        top = int(cfg.field_height - cfg.obstacle_height)
        return pygame.Rect(int(x), top, int(cfg.obstacle_width), int(cfg.obstacle_height))

    def draw(self, screen: pygame.Surface, snapshot: Snapshot):
        cfg = self.config
        screen.fill(BACKGROUND)

        for x in snapshot.obstacles:
            pygame.draw.rect(screen, OBSTACLE_COLOR, self.obstacle_rect(x), border_radius=4)
        pygame.draw.rect(screen, CHARACTER_COLOR, self.character_rect(snapshot.y), border_radius=8)

        # Ground
        pygame.draw.rect(
            screen, GROUND_COLOR,
            (0, cfg.field_height - GROUND_THICKNESS, cfg.field_width, GROUND_THICKNESS))

        # HUD
        score_text = self.large_font.render(f"Score: {snapshot.score}", True, TEXT_COLOR)
        screen.blit(score_text, (20, 10))

        if snapshot.game_over:
            self._draw_game_over(screen)
        else:
            hint = self.font.render("Press Space to Jump", True, HINT_COLOR)
            screen.blit(hint, (cfg.field_width - hint.get_width() - 20, 12))

        pygame.draw.rect(screen, BORDER, screen.get_rect(), 2)

    def _draw_game_over(self, screen: pygame.Surface):
        title = self.large_font.render("Game Over", True, TEXT_COLOR)
        sub = self.font.render("Press Space to Restart", True, TEXT_COLOR)

        width = max(title.get_width(), sub.get_width()) + 80
        height = title.get_height() + sub.get_height() + 48
        panel = pygame.Rect(0, 0, width, height)
        panel.center = (self.config.field_width // 2, int(self.config.field_height * 0.4))
        pygame.draw.rect(screen, PANEL_COLOR, panel, border_radius=12)

        screen.blit(title, (panel.centerx - title.get_width() // 2, panel.top + 24))
        screen.blit(sub, (panel.centerx - sub.get_width() // 2, panel.top + 24 + title.get_height()))


class RunnerClient:
    def __init__(self, simulation: Simulation, fixed_timestep: bool = False):
        pygame.init()
        self.simulation = simulation
        self.config = simulation.config
        self.fixed_timestep = fixed_timestep

        self.screen = pygame.display.set_mode((self.config.field_width, self.config.field_height))
        pygame.display.set_caption("Dino Runner")
        self.renderer = Renderer(self.config)

        # Time Management
        self.clock = pygame.time.Clock()
        self.tick_timer = 0.0

    def handle_events(self, events: List[pygame.event.Event]) -> bool:
        """Forwards intents to the simulation. Returns False once the player quits."""
        for event in events:
            if is_quit_event(event):
                return False
            intent = intent_for_event(event, game_over=not self.simulation.running)
            if intent is not None:
                self.simulation.handle_intent(intent)
        return True

    def ticks_due(self, frame_seconds: float) -> int:
        """How many simulation ticks this frame should run."""
        if not self.fixed_timestep:
            return 1

        self.tick_timer += frame_seconds
        due = int(self.tick_timer // TICK_TIME)
        self.tick_timer -= due * TICK_TIME
        if due > MAX_TICKS_PER_FRAME:
            logger.debug(f"Dropping {due - MAX_TICKS_PER_FRAME} ticks after a stall")
            due = MAX_TICKS_PER_FRAME
        return due

    def step_frame(self, frame_seconds: float):
        """Runs the ticks due this frame. A finished run discards the accumulator."""
        for _ in range(self.ticks_due(frame_seconds)):
            if not self.simulation.running:
                break
            self.simulation.tick()

        if not self.simulation.running:
            self.tick_timer = 0.0

    def run(self):
        """The main client execution loop."""
        logger.info(
            f"Starting at {self.config.fps} FPS "
            f"({'fixed timestep' if self.fixed_timestep else 'one tick per frame'})")

        running = True
        while running:
            frame_seconds = self.clock.tick(self.config.fps) / 1000.0
            running = self.handle_events(pygame.event.get())

            self.step_frame(frame_seconds)
            self.renderer.draw(self.screen, Snapshot.from_dict(self.simulation.snapshot()))
            pygame.display.flip()

        pygame.quit()
