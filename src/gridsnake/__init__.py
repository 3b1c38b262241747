from .grid import BoardFullError, cells_equal, in_bounds, is_opposite, place_food
from .logic import step
from .scheduler import FixedStepScheduler
from .session import Session
from .state import State, new_state
from .store import BestScore, JsonFileStore, MemoryStore, load_best_score, save_best_score

__all__ = [
    "BoardFullError",
    "cells_equal",
    "in_bounds",
    "is_opposite",
    "place_food",
    "step",
    "FixedStepScheduler",
    "Session",
    "State",
    "new_state",
    "BestScore",
    "JsonFileStore",
    "MemoryStore",
    "load_best_score",
    "save_best_score",
]
