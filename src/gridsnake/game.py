from __future__ import annotations

import logging
import random

import pygame

from . import config
from .controls import handle_input
from .render import draw_state
from .scheduler import FixedStepScheduler
from .session import Session

log = logging.getLogger(__name__)


def main(store, fps_limit: int = config.FPS_LIMIT, seed: int | None = None) -> None:
    pygame.init()
    screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
    pygame.display.set_caption("Snake")
    font = pygame.font.Font(None, 26)
    clock = pygame.time.Clock()

    session = Session(store, rng=random.Random(seed))
    scheduler = FixedStepScheduler(session)
    session.on_restart = scheduler.reset

    running = True
    while running:
        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        handle_input(session, events)
        scheduler.frame(pygame.time.get_ticks())
        draw_state(screen, session.state, session.best.value, font)
        pygame.display.flip()
        clock.tick(fps_limit)

    scheduler.stop()
    pygame.quit()
    log.info("bye, best score %d", session.best.value)
