from __future__ import annotations

import logging
import random

from .logic import step
from .state import State, new_state
from .store import BestScore

log = logging.getLogger(__name__)


class Session:
    """Owns the live game state together with the best score and random source."""

    def __init__(self, store, rng: random.Random | None = None, on_restart=None):
        self.rng = rng or random.Random()
        self.best = BestScore(store)
        self.state: State = new_state(self.rng)
        self.on_restart = on_restart
        log.info("session started, best score %d", self.best.value)

    def tick(self) -> State:
        return step(self.state, on_game_over=self.best.record, rng=self.rng)

    def restart(self) -> State:
        self.state = new_state(self.rng)
        if self.on_restart is not None:
            self.on_restart()
        log.info("restarted")
        return self.state
