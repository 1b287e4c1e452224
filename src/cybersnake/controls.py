from __future__ import annotations

import pygame

from . import config
from .engine import GameEngine
from .render import Layout, buttons_for
from .state import Phase

KEY_TO_DIRECTION = {
    pygame.K_UP: config.UP,
    pygame.K_DOWN: config.DOWN,
    pygame.K_LEFT: config.LEFT,
    pygame.K_RIGHT: config.RIGHT,
}
PAUSE_KEY = pygame.K_ESCAPE
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
MENU_KEY = pygame.K_m


def handle_key(engine: GameEngine, key: int) -> bool:
    """Map one key press to an engine command. Returns True if it was consumed."""
    phase = engine.phase

    if key in KEY_TO_DIRECTION:
        # Arrow keys belong to the snake while playing and do nothing otherwise.
        if phase is not Phase.PLAYING:
            return False
        engine.set_direction(KEY_TO_DIRECTION[key])
        return True

    if key == PAUSE_KEY and phase in (Phase.PLAYING, Phase.PAUSED):
        engine.toggle_pause()
        return True

    if key in START_KEYS and phase in (Phase.MENU, Phase.GAME_OVER):
        engine.start()
        return True

    if key == MENU_KEY and phase in (Phase.GAME_OVER, Phase.PAUSED):
        engine.return_to_menu()
        return True

    return False


def handle_click(engine: GameEngine, pos, layout: Layout) -> bool:
    for button in buttons_for(engine.phase, layout):
        if button.rect.collidepoint(pos):
            button.command(engine)
            return True
    return False


def handle_event(engine: GameEngine, event: pygame.event.Event, layout: Layout) -> bool:
    if event.type == pygame.KEYDOWN:
        return handle_key(engine, event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        return handle_click(engine, event.pos, layout)
    return False
