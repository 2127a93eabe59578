import logging
import random
import time

import pygame

from config import (
    CELL_PX,
    FLASH_DURATION,
    FPS,
    GRID_HEIGHT,
    GRID_WIDTH,
    HIGHSCORE_FILE,
    INFO_PANEL_WIDTH,
    MIN_GRID_CELLS,
    MIN_WINDOW_HEIGHT,
    TICK_MS,
)
from game import engine
from game.audio import SoundBoard
from game.controls import (
    Command,
    apply_command,
    build_buttons,
    button_at,
    event_position,
    key_to_command,
)
from game.engine import Phase
from game.highscore import HighScoreStore
from game.renderer import Renderer
from game.scheduler import TickScheduler

logger = logging.getLogger(__name__)


def grid_for_window(window_width, window_height, cell_px=CELL_PX):
    """Board size in cells that fits a window, never below MIN_GRID_CELLS."""
    width = (window_width - INFO_PANEL_WIDTH) // cell_px
    height = window_height // cell_px
    return max(MIN_GRID_CELLS, width), max(MIN_GRID_CELLS, height)


def window_for_grid(width, height, cell_px=CELL_PX):
    return (width * cell_px + INFO_PANEL_WIDTH, max(height * cell_px, MIN_WINDOW_HEIGHT))


class SnakeApp:
    """Main game controller: window, input, tick loop and persistence."""

    def __init__(self, width=GRID_WIDTH, height=GRID_HEIGHT, tick_ms=TICK_MS,
                 highscore_file=HIGHSCORE_FILE, muted=False, rng=None):
        pygame.init()
        self.screen = pygame.display.set_mode(window_for_grid(width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Snake Game")
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen)
        self.sounds = SoundBoard(muted=muted)
        self.rng = rng or random.Random()

        # High score persistence
        self.store = HighScoreStore(highscore_file)
        self.state = engine.new_game(width, height, self.store.load(), self.rng)
        self.scheduler = TickScheduler(tick_ms)

        self.buttons = []
        self._layout()

        self.running = True
        # Exit confirmation flag: when True, user must confirm quit with Y
        self.exit_confirmation = False
        self.flash_until = 0.0

    @property
    def panel_x(self):
        return self.screen.get_width() - INFO_PANEL_WIDTH

    def _layout(self):
        self.buttons = build_buttons(self.panel_x, INFO_PANEL_WIDTH, self.screen.get_height())

    def set_state(self, new_state):
        """Swap in a new state and react to the phase change."""
        old_phase = self.state.phase
        self.state = new_state
        if new_state.phase is old_phase:
            return
        logger.info("Phase %s -> %s", old_phase.value, new_state.phase.value)

        if new_state.phase is Phase.RUNNING:
            self.scheduler.start()
            if old_phase in (Phase.READY, Phase.ENDED):
                self.sounds.play('start')
        else:
            self.scheduler.stop()

    def handle_command(self, command):
        if command is Command.QUIT:
            self.exit_confirmation = True
        elif command is Command.MUTE:
            self.sounds.toggle_mute()
        elif command is not None:
            self.set_state(apply_command(self.state, command, self.rng))

    def handle_resize(self, size):
        """Re-fit the board to a resized window."""
        width, height = grid_for_window(*size)
        self.set_state(engine.resize(self.state, width, height, self.rng))
        self._layout()

    def tick(self):
        """Advance the engine once and react to what happened."""
        result = engine.advance(self.state, rng=self.rng)
        if result.new_record:
            self.store.save(result.state.high_score)
        if result.ate:
            self.sounds.play('record' if result.new_record else 'eat')
        if result.collision:
            self.flash_until = time.time() + FLASH_DURATION
            self.sounds.play('die')
        self.set_state(result.state)

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self.handle_resize(event.size)
        elif event.type == pygame.KEYDOWN:
            # If exit confirmation dialog is active, handle Y/N/Esc only
            if self.exit_confirmation:
                if event.key == pygame.K_y:
                    print('\n\nExit confirmed by user.')
                    self.running = False
                elif event.key in (pygame.K_n, pygame.K_ESCAPE):
                    self.exit_confirmation = False
                return
            self.handle_command(key_to_command(event.key))
        elif not self.exit_confirmation:
            pos = event_position(event, self.screen.get_size())
            if pos is not None:
                self.handle_command(button_at(self.buttons, pos))

    def run(self):
        """Main game loop."""
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)

            elapsed = self.clock.tick(FPS)
            if not self.exit_confirmation:
                for _ in range(self.scheduler.update(elapsed)):
                    self.tick()
                    if self.state.phase is not Phase.RUNNING:
                        break

            self.renderer.draw(
                self.state,
                self.panel_x,
                buttons=self.buttons,
                muted=self.sounds.muted,
                fps=self.clock.get_fps(),
                flash=time.time() < self.flash_until,
                confirm_exit=self.exit_confirmation,
            )
            pygame.display.flip()

        self.cleanup()

    def cleanup(self):
        """Clean up resources."""
        self.running = False
        self.scheduler.stop()
        pygame.quit()
