"""Keyboard and touch input mapped onto engine commands."""

from enum import Enum

import pygame

from game import engine
from game.engine import Phase
from game.snake import Direction


class Command(Enum):
    START = "start"
    PAUSE = "pause"      # pause/resume toggle
    ACTION = "action"    # start when idle, pause/resume otherwise
    RESET = "reset"
    MUTE = "mute"
    QUIT = "quit"


KEY_BINDINGS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_SPACE: Command.ACTION,
    pygame.K_RETURN: Command.START,
    pygame.K_p: Command.PAUSE,
    pygame.K_r: Command.RESET,
    pygame.K_m: Command.MUTE,
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_q: Command.QUIT,
}


def key_to_command(key):
    """Return the Direction or Command bound to a key, or None."""
    return KEY_BINDINGS.get(key)


def apply_command(state, command, rng=None):
    """Apply a direction or game command to the state.

    MUTE and QUIT are not game transitions and leave the state alone.
    """
    if isinstance(command, Direction):
        return engine.steer(state, command)
    if command is Command.START:
        return engine.start(state, rng)
    if command is Command.PAUSE:
        return engine.toggle_pause(state)
    if command is Command.ACTION:
        if state.phase in (Phase.READY, Phase.ENDED):
            return engine.start(state, rng)
        return engine.toggle_pause(state)
    if command is Command.RESET:
        return engine.reset(state, rng)
    return state


class Button:
    """Clickable/touchable rectangle in the info panel."""

    def __init__(self, label, rect, command):
        self.label = label
        self.rect = pygame.Rect(rect)
        self.command = command

    def __repr__(self):
        return f"<Button {self.label!r} {tuple(self.rect)}>"


def build_buttons(panel_x, panel_width, panel_height, size=48, gap=6):
    """Lay out the action buttons and the D-pad inside the info panel."""
    pad = 10
    width = panel_width - 2 * pad
    buttons = [
        Button("Start / Pause", (panel_x + pad, 90, width, 32), Command.ACTION),
        Button("Reset", (panel_x + pad, 128, width, 32), Command.RESET),
    ]

    # D-pad: a plus shape centred horizontally, bottom row 40px above the edge
    half = size // 2
    cx = panel_x + panel_width // 2
    cy = panel_height - 40 - size - gap - half
    dpad = [
        ("Up", Direction.UP, (cx - half, cy - half - size - gap)),
        ("Left", Direction.LEFT, (cx - half - size - gap, cy - half)),
        ("Right", Direction.RIGHT, (cx + half + gap, cy - half)),
        ("Down", Direction.DOWN, (cx - half, cy + half + gap)),
    ]
    for label, direction, (x, y) in dpad:
        buttons.append(Button(label, (x, y, size, size), direction))
    return buttons


def button_at(buttons, pos):
    """Return the command of the button under ``pos``, or None."""
    for button in buttons:
        if button.rect.collidepoint(pos):
            return button.command
    return None


def event_position(event, window_size):
    """Pixel position of a mouse click or touch event, else None.

    Finger events report normalised coordinates. Mouse events that SDL
    synthesises from touches are skipped so a tap only counts once.
    """
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if getattr(event, 'touch', False):
            return None
        return event.pos
    if event.type == pygame.FINGERDOWN:
        w, h = window_size
        return (int(event.x * w), int(event.y * h))
    return None
