from __future__ import annotations

import random

from . import config

Cell = tuple[int, int]


class BoardFullError(RuntimeError):
    """Raised when there is no free cell left to put food on."""


def add_vectors(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0], a[1] + b[1])


def cells_equal(a: Cell, b: Cell) -> bool:
    return a[0] == b[0] and a[1] == b[1]


def is_opposite(a: Cell, b: Cell) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def in_bounds(c: Cell) -> bool:
    x, y = c
    return 0 <= x < config.GRID and 0 <= y < config.GRID


def place_food(occupied, rng: random.Random | None = None) -> Cell:
    """Pick a uniformly random free cell by rejection sampling.

    Only a completely full board is refused; any free cell is eventually hit.
    """
    rng = rng or random
    occupied = set(occupied)
    if len(occupied) >= config.GRID * config.GRID:
        raise BoardFullError("no free cell left for food")
    while True:
        pos = (rng.randint(0, config.GRID - 1), rng.randint(0, config.GRID - 1))
        if pos not in occupied:
            return pos
