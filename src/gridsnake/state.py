from __future__ import annotations

import random
from dataclasses import dataclass

from . import config
from .grid import Cell, place_food


@dataclass
class State:
    snake: list[Cell]  # head is first element
    direction: Cell
    pending: Cell
    food: Cell
    score: int = 0
    tick_ms: int = config.BASE_TICK_MS
    paused: bool = False
    game_over: bool = False

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def running(self) -> bool:
        return not (self.paused or self.game_over)


def initial_snake() -> list[Cell]:
    cx, cy = config.GRID // 2, config.GRID // 2
    dx, dy = config.START_DIRECTION
    return [(cx - dx * i, cy - dy * i) for i in range(config.START_LENGTH)]


def new_state(rng: random.Random | None = None) -> State:
    snake = initial_snake()
    return State(
        snake=snake,
        direction=config.START_DIRECTION,
        pending=config.START_DIRECTION,
        food=place_food(snake, rng),
    )
