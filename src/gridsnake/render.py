from __future__ import annotations

import pygame

from . import config
from .state import State


def format_speed(tick_ms: int) -> str:
    return f"{config.BASE_TICK_MS / tick_ms:.2f}x"


def cell_rect(x: int, y: int, pad: int = 0) -> pygame.Rect:
    return pygame.Rect(
        x * config.BLOCK + pad,
        config.HUD_HEIGHT + y * config.BLOCK + pad,
        config.BLOCK - pad * 2,
        config.BLOCK - pad * 2,
    )


def draw_grid(screen: pygame.Surface) -> None:
    top = config.HUD_HEIGHT
    bottom = top + config.GRID * config.BLOCK
    for i in range(1, config.GRID):
        p = i * config.BLOCK
        pygame.draw.line(screen, config.GRID_LINE, (p, top), (p, bottom))
        pygame.draw.line(screen, config.GRID_LINE, (0, top + p), (config.WIDTH, top + p))


def draw_food(screen: pygame.Surface, food) -> None:
    center = cell_rect(*food).center
    radius = int(config.BLOCK * 0.32)
    pygame.draw.circle(screen, config.FOOD_GLOW, center, int(radius * 1.6))
    pygame.draw.circle(screen, config.FOOD, center, radius)


def draw_snake(screen: pygame.Surface, snake, direction) -> None:
    # Tail first so the head is drawn on top.
    for i in range(len(snake) - 1, -1, -1):
        x, y = snake[i]
        color = config.SNAKE_HEAD if i == 0 else config.SNAKE_BODY
        pygame.draw.rect(screen, color, cell_rect(x, y, pad=2), border_radius=6)

    hx, hy = snake[0]
    dx, dy = direction
    rect = cell_rect(hx, hy)
    ey = rect.y + config.BLOCK * 0.42 + dy * config.BLOCK * 0.1
    for ex in (0.35, 0.65):
        eye = (int(rect.x + config.BLOCK * ex + dx * config.BLOCK * 0.08), int(ey))
        pygame.draw.circle(screen, config.EYE, eye, max(1, int(config.BLOCK * 0.08)))


def draw_hud(screen: pygame.Surface, state: State, best: int, font: pygame.font.Font) -> None:
    pygame.draw.rect(screen, config.HUD_BG, (0, 0, config.WIDTH, config.HUD_HEIGHT))
    text = f"Score: {state.score}   Best: {best}   Speed: {format_speed(state.tick_ms)}"
    surf = font.render(text, True, config.TEXT)
    screen.blit(surf, surf.get_rect(midleft=(10, config.HUD_HEIGHT // 2)))


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, title: str, subtitle: str) -> None:
    shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    shade.fill(config.OVERLAY)
    screen.blit(shade, (0, 0))

    cx, cy = config.WIDTH // 2, config.HUD_HEIGHT + config.GRID * config.BLOCK // 2
    title_surf = font.render(title, True, config.TEXT)
    screen.blit(title_surf, title_surf.get_rect(center=(cx, cy - 14)))
    sub_surf = font.render(subtitle, True, config.TEXT)
    screen.blit(sub_surf, sub_surf.get_rect(center=(cx, cy + 18)))


def draw_state(screen: pygame.Surface, state: State, best: int, font: pygame.font.Font) -> None:
    """Draw one frame. Reads state only."""
    screen.fill(config.BG)
    draw_grid(screen)
    draw_food(screen, state.food)
    draw_snake(screen, state.snake, state.direction)
    draw_hud(screen, state, best, font)

    if state.game_over:
        draw_overlay(screen, font, "Game Over", "Press R to restart")
    elif state.paused:
        draw_overlay(screen, font, "Paused", "Press Space to resume")
