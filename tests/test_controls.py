"""
Tests for game/controls.py - key bindings, commands and touch buttons.
"""

import itertools
from dataclasses import replace

import pygame
import pytest

from game import engine
from game.controls import (
    Command,
    apply_command,
    build_buttons,
    button_at,
    event_position,
    key_to_command,
)
from game.engine import GameState, Phase
from game.snake import Cell, Direction


@pytest.fixture
def ready(rng):
    return engine.new_game(10, 10, rng=rng)


@pytest.fixture
def active():
    return GameState(width=10, height=10, snake=(Cell(5, 5),), food=Cell(0, 0),
                     phase=Phase.RUNNING, score=30)


class TestKeyBindings:
    """Tests for keyboard mapping."""

    @pytest.mark.parametrize("key,expected", [
        (pygame.K_UP, Direction.UP),
        (pygame.K_w, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_s, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_d, Direction.RIGHT),
        (pygame.K_SPACE, Command.ACTION),
        (pygame.K_RETURN, Command.START),
        (pygame.K_p, Command.PAUSE),
        (pygame.K_r, Command.RESET),
        (pygame.K_m, Command.MUTE),
        (pygame.K_ESCAPE, Command.QUIT),
        (pygame.K_q, Command.QUIT),
    ])
    def test_binding(self, key, expected):
        assert key_to_command(key) is expected

    def test_unbound_key(self):
        assert key_to_command(pygame.K_z) is None


class TestApplyCommand:
    """Tests for routing commands into the engine."""

    def test_action_starts_ready_game(self, ready, rng):
        assert apply_command(ready, Command.ACTION, rng).phase is Phase.RUNNING

    def test_action_pauses_and_resumes(self, active, rng):
        paused = apply_command(active, Command.ACTION, rng)
        assert paused.phase is Phase.PAUSED
        assert apply_command(paused, Command.ACTION, rng).phase is Phase.RUNNING

    def test_action_restarts_ended_game(self, active, rng):
        ended = replace(active, phase=Phase.ENDED)
        restarted = apply_command(ended, Command.ACTION, rng)
        assert restarted.phase is Phase.RUNNING
        assert restarted.score == 0

    def test_start_ignored_while_running(self, active, rng):
        assert apply_command(active, Command.START, rng) is active

    def test_pause_command(self, active, rng):
        assert apply_command(active, Command.PAUSE, rng).phase is Phase.PAUSED

    def test_reset(self, active, rng):
        fresh = apply_command(active, Command.RESET, rng)
        assert fresh.phase is Phase.READY
        assert fresh.score == 0

    def test_direction_steers(self, active, rng):
        assert apply_command(active, Direction.UP, rng).pending_direction is Direction.UP

    def test_opposite_direction_ignored(self, active, rng):
        assert apply_command(active, Direction.LEFT, rng).pending_direction is Direction.RIGHT

    @pytest.mark.parametrize("command", [Command.MUTE, Command.QUIT])
    def test_non_game_commands_leave_state(self, active, rng, command):
        assert apply_command(active, command, rng) is active


class TestButtons:
    """Tests for the on-screen touch controls."""

    @pytest.fixture
    def buttons(self):
        return build_buttons(500, 220, 400)

    def test_every_command_has_a_button(self, buttons):
        commands = {b.command for b in buttons}
        assert commands == {Command.ACTION, Command.RESET} | set(Direction)

    def test_buttons_inside_panel(self, buttons):
        panel = pygame.Rect(500, 0, 220, 400)
        for button in buttons:
            assert panel.contains(button.rect), button

    def test_buttons_do_not_overlap(self, buttons):
        for a, b in itertools.combinations(buttons, 2):
            assert not a.rect.colliderect(b.rect), (a, b)

    def test_button_at_centre(self, buttons):
        for button in buttons:
            assert button_at(buttons, button.rect.center) is button.command

    def test_button_at_empty_spot(self, buttons):
        assert button_at(buttons, (10, 10)) is None


class TestEventPosition:
    """Tests for extracting positions from pointer events."""

    def test_left_click(self):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(40, 60))
        assert event_position(event, (800, 400)) == (40, 60)

    def test_right_click_ignored(self):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(40, 60))
        assert event_position(event, (800, 400)) is None

    def test_synthetic_touch_click_ignored(self):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(40, 60), touch=True)
        assert event_position(event, (800, 400)) is None

    def test_finger_down_is_scaled(self):
        event = pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.25, finger_id=0, touch_id=0)
        assert event_position(event, (800, 400)) == (400, 100)

    def test_other_events(self):
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)
        assert event_position(event, (800, 400)) is None
