from __future__ import annotations

import logging

from . import config
from .session import Session

log = logging.getLogger(__name__)


class FixedStepScheduler:
    """Runs whole simulation ticks out of the real time banked between frames.

    Elapsed time per frame and the bank itself are both capped at max_frame_ms, so
    a long stall (window dragged, machine suspended) costs at most
    max_frame_ms // tick_ms catch-up ticks, tick_ms being the interval at frame
    start. Eating mid-frame shortens the interval, raising that ceiling to
    max_frame_ms // MIN_TICK_MS.

    Call reset() whenever the session restarts.
    """

    def __init__(self, session: Session, max_frame_ms: int = config.MAX_FRAME_MS):
        self.session = session
        self.max_frame_ms = max_frame_ms
        self.accumulator = 0.0
        self.last_ms: float | None = None

    def reset(self) -> None:
        self.accumulator = 0.0

    def stop(self) -> None:
        self.last_ms = None
        self.accumulator = 0.0

    def frame(self, now_ms: float) -> int:
        """Account for one rendered frame at now_ms; return the number of ticks run."""
        if self.last_ms is None:
            self.last_ms = now_ms
        elapsed = now_ms - self.last_ms
        self.last_ms = now_ms

        if elapsed > self.max_frame_ms:
            log.debug("long frame %.0fms clamped to %dms", elapsed, self.max_frame_ms)
        elapsed = min(max(elapsed, 0.0), self.max_frame_ms)

        if not self.session.state.running:
            return 0

        self.accumulator = min(self.accumulator + elapsed, self.max_frame_ms)

        ticks = 0
        while self.session.state.running:
            # tick_ms shrinks when food is eaten, so it is re-read every pass.
            tick_ms = self.session.state.tick_ms
            if self.accumulator < tick_ms:
                break
            self.session.tick()
            self.accumulator -= tick_ms
            ticks += 1
        return ticks
