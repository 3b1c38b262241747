import random

import pytest

from gridsnake import config
from gridsnake.grid import BoardFullError, add_vectors, cells_equal, in_bounds, is_opposite, place_food


def test_cells_equal():
    assert cells_equal((3, 4), (3, 4))
    assert not cells_equal((3, 4), (4, 3))


def test_is_opposite():
    assert is_opposite((1, 0), (-1, 0))
    assert is_opposite((0, -1), (0, 1))
    assert not is_opposite((1, 0), (0, 1))
    assert not is_opposite((1, 0), (1, 0))


def test_in_bounds_edges():
    last = config.GRID - 1
    assert in_bounds((0, 0))
    assert in_bounds((last, last))
    assert not in_bounds((-1, 0))
    assert not in_bounds((0, config.GRID))
    assert not in_bounds((config.GRID, 5))


def test_add_vectors():
    assert add_vectors((12, 12), (1, 0)) == (13, 12)
    assert add_vectors((0, 5), (0, -1)) == (0, 4)


def test_place_food_lands_on_free_cell():
    rng = random.Random(3)
    occupied = {(x, 0) for x in range(config.GRID)}
    for _ in range(200):
        food = place_food(occupied, rng)
        assert in_bounds(food)
        assert food not in occupied


def test_place_food_finds_the_last_free_cell():
    free = (5, 7)
    occupied = {(x, y) for x in range(config.GRID) for y in range(config.GRID)} - {free}
    assert place_food(occupied, random.Random(0)) == free


def test_place_food_full_board_raises():
    occupied = [(x, y) for x in range(config.GRID) for y in range(config.GRID)]
    with pytest.raises(BoardFullError):
        place_food(occupied, random.Random(0))
