"""Game state machine and per-tick update rule.

Every operation here is a pure function: it takes a ``GameState`` and returns
a new one. Persistence, timing and drawing live in the presentation layer.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from config import FOOD_REWARD
from game.food import BoardFullError, place_food
from game.snake import (
    Body,
    Cell,
    Direction,
    check_self_collision,
    check_wall_collision,
    fits,
    initial_snake,
    move,
    request_direction,
)

logger = logging.getLogger(__name__)


class Phase(Enum):
    READY = "READY"
    RUNNING = "RUNNING"
    PAUSED = "PAUSED"
    ENDED = "ENDED"


@dataclass(frozen=True)
class GameState:
    """Snapshot of one game.

    Attributes:
        width, height: board size in cells
        snake: body cells, head first
        food: food cell, or None once the snake fills the board
        direction: heading applied on the last tick
        pending_direction: latest accepted request, applied on the next tick
        score: points this game
        high_score: best score seen, including this game
        phase: lifecycle phase
        pending_size: board size waiting for the next reset
    """
    width: int
    height: int
    snake: Body
    food: Optional[Cell]
    direction: Direction = Direction.RIGHT
    pending_direction: Direction = Direction.RIGHT
    score: int = 0
    high_score: int = 0
    phase: Phase = Phase.READY
    pending_size: Optional[Tuple[int, int]] = None

    @property
    def head(self):
        return self.snake[0]


@dataclass(frozen=True)
class TickResult:
    """Outcome of one ``advance`` call."""
    state: GameState
    ate: bool = False
    new_record: bool = False
    collision: Optional[str] = None
    board_full: bool = False


def _check_size(width, height):
    # The snake and the food need a cell each
    if width <= 0 or height <= 0 or width * height < 2:
        raise ValueError(f"Grid must hold at least 2 cells, got {width}x{height}")


def new_game(width, height, high_score=0, rng=None):
    """Build a READY game with a fresh snake and food."""
    _check_size(width, height)
    snake = initial_snake(width, height)
    return GameState(
        width=width,
        height=height,
        snake=snake,
        food=place_food(snake, width, height, rng),
        high_score=max(0, int(high_score)),
    )


def reset(state, rng=None):
    """Re-arm the board to READY from any phase; the high score survives."""
    width, height = state.pending_size or (state.width, state.height)
    return new_game(width, height, state.high_score, rng)


def start(state, rng=None):
    """READY/ENDED -> RUNNING with a freshly laid out board."""
    if state.phase not in (Phase.READY, Phase.ENDED):
        return state
    fresh = reset(state, rng)
    logger.info("Game started on a %dx%d board", fresh.width, fresh.height)
    return replace(fresh, phase=Phase.RUNNING)


def pause(state):
    if state.phase is not Phase.RUNNING:
        return state
    return replace(state, phase=Phase.PAUSED)


def resume(state):
    if state.phase is not Phase.PAUSED:
        return state
    return replace(state, phase=Phase.RUNNING)


def toggle_pause(state):
    """Pause a running game or resume a paused one."""
    if state.phase is Phase.RUNNING:
        return pause(state)
    return resume(state)


def steer(state, requested):
    """Record a direction request for the next tick.

    Ignored unless RUNNING. A request opposite to the stored one is
    rejected, and so is one opposite to the heading applied on the last tick,
    so two quick turns between ticks cannot reverse the snake. The latest
    valid request wins.
    """
    if state.phase is not Phase.RUNNING:
        return state
    if request_direction(state.pending_direction, requested) is not requested:
        return state
    if request_direction(state.direction, requested) is not requested:
        return state
    return replace(state, pending_direction=requested)


def advance(state, direction=None, rng=None):
    """Run one tick: move, collide, eat, grow.

    ``direction`` defaults to the pending request. A fatal move ends the game
    and discards the move, leaving snake, food and score as they were.
    """
    if state.phase is not Phase.RUNNING:
        return TickResult(state)

    direction = direction or state.pending_direction
    new_head = direction.step(state.head)

    if check_wall_collision(new_head, state.width, state.height):
        return _end(state, "wall")
    if check_self_collision(new_head, state.snake):
        return _end(state, "self")

    if new_head != state.food:
        snake = move(state.snake, new_head, grow=False)
        return TickResult(replace(state, snake=snake, direction=direction,
                                  pending_direction=direction))

    snake = move(state.snake, new_head, grow=True)
    score = state.score + FOOD_REWARD
    new_record = score > state.high_score
    high_score = score if new_record else state.high_score
    if new_record:
        logger.info("New high score: %d", score)

    grown = replace(state, snake=snake, direction=direction,
                    pending_direction=direction, score=score,
                    high_score=high_score)
    try:
        food = place_food(snake, state.width, state.height, rng)
    except BoardFullError:
        logger.info("Board filled at score %d", score)
        return TickResult(replace(grown, food=None, phase=Phase.ENDED),
                          ate=True, new_record=new_record, board_full=True)
    return TickResult(replace(grown, food=food), ate=True, new_record=new_record)


def _end(state, reason):
    logger.info("Game over (%s collision) with score %d", reason, state.score)
    return TickResult(replace(state, phase=Phase.ENDED), collision=reason)


def resize(state, width, height, rng=None):
    """Adapt the game to a new board size.

    READY boards are laid out again and ENDED boards simply take the new size.
    A game in progress takes it only if the snake and food still fit;
    otherwise the size waits in ``pending_size`` until the next reset.
    """
    _check_size(width, height)
    if (width, height) == (state.width, state.height):
        return replace(state, pending_size=None)
    if state.phase is Phase.READY:
        return new_game(width, height, state.high_score, rng)
    if state.phase is Phase.ENDED:
        return replace(state, width=width, height=height, pending_size=None)

    cells = state.snake + ((state.food,) if state.food is not None else ())
    if fits(cells, width, height):
        return replace(state, width=width, height=height, pending_size=None)
    logger.debug("Deferring resize to %dx%d until the next game", width, height)
    return replace(state, pending_size=(width, height))


def replay(state, moves, rng=None):
    """Feed directions through ``steer`` and ``advance``, one tick each.

    ``None`` entries tick without steering. Stops early once the game leaves
    RUNNING.
    """
    for requested in moves:
        if state.phase is not Phase.RUNNING:
            break
        if requested is not None:
            state = steer(state, requested)
        state = advance(state, rng=rng).state
    return state
