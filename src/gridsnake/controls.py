from __future__ import annotations

import pygame

from .grid import Cell, is_opposite
from .session import Session
from .state import State

# Letter keys report the same keycode with or without shift/caps lock.
KEY_DIRECTIONS: dict[int, Cell] = {
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
    pygame.K_w: (0, -1),
    pygame.K_s: (0, 1),
    pygame.K_a: (-1, 0),
    pygame.K_d: (1, 0),
}
PAUSE_KEYS = (pygame.K_SPACE,)
RESTART_KEYS = (pygame.K_r,)


def buffer_direction(state: State, intent: Cell) -> bool:
    """Queue a turn for the next tick; a 180 degree reversal is dropped."""
    if is_opposite(intent, state.direction):
        return False
    state.pending = intent
    return True


def toggle_pause(state: State) -> bool:
    if state.game_over:
        return False
    state.paused = not state.paused
    return True


def handle_key(session: Session, key: int) -> bool:
    """Apply one key press. Returns True if it changed anything."""
    if key in PAUSE_KEYS:
        return toggle_pause(session.state)
    if key in RESTART_KEYS:
        session.restart()
        return True
    intent = KEY_DIRECTIONS.get(key)
    if intent is None:
        return False
    return buffer_direction(session.state, intent)


def handle_input(session: Session, events) -> bool:
    changed = False
    for event in events:
        if event.type == pygame.KEYDOWN:
            changed = handle_key(session, event.key) or changed
    return changed
