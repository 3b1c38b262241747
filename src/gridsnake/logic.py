from __future__ import annotations

import logging
import math
import random
from typing import Callable, Optional

from . import config
from .grid import BoardFullError, Cell, add_vectors, cells_equal, in_bounds, is_opposite, place_food
from .state import State

log = logging.getLogger(__name__)

GameOverHook = Optional[Callable[[int], None]]


def next_tick_ms(tick_ms: int) -> int:
    return max(config.MIN_TICK_MS, math.floor(tick_ms * config.SPEEDUP_PER_FOOD))


def commit_direction(state: State) -> None:
    # The buffer may have been filled against a direction that changed since.
    if not is_opposite(state.pending, state.direction):
        state.direction = state.pending


def check_collisions(state: State, new_head: Cell, will_eat: bool) -> bool:
    """Return True if moving the head to new_head kills the snake."""
    if not in_bounds(new_head):
        return True
    # The tail moves out of the way unless the snake is growing this tick.
    body = state.snake if will_eat else state.snake[:-1]
    return any(cells_equal(cell, new_head) for cell in body)


def move_snake(state: State, new_head: Cell, will_eat: bool) -> None:
    state.snake.insert(0, new_head)
    if not will_eat:
        state.snake.pop()


def update_food_and_score(
    state: State, rng: random.Random | None = None, on_game_over: GameOverHook = None
) -> None:
    state.score += 1
    state.tick_ms = next_tick_ms(state.tick_ms)
    try:
        state.food = place_food(state.snake, rng)
    except BoardFullError:
        log.info("board full at score %d", state.score)
        end_game(state, on_game_over)
        return
    log.debug("ate food: score=%d tick=%dms next food at %s", state.score, state.tick_ms, state.food)


def end_game(state: State, on_game_over: GameOverHook = None) -> None:
    state.game_over = True
    state.paused = False
    log.info("game over: score=%d length=%d", state.score, len(state.snake))
    if on_game_over is not None:
        on_game_over(state.score)


def step(state: State, on_game_over: GameOverHook = None, rng: random.Random | None = None) -> State:
    """Advance the simulation by one grid cell.

    Does nothing while paused or after the game has ended. A collision freezes
    snake, food and score and reports the final score through on_game_over.
    """
    if not state.running:
        return state

    commit_direction(state)
    new_head = add_vectors(state.head, state.direction)
    will_eat = cells_equal(new_head, state.food)

    if check_collisions(state, new_head, will_eat):
        end_game(state, on_game_over)
        return state

    move_snake(state, new_head, will_eat)
    if will_eat:
        update_food_and_score(state, rng, on_game_over)
    return state
