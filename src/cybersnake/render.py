from __future__ import annotations

from collections import namedtuple

import pygame

from . import config
from .engine import GameEngine
from .state import Phase, Snapshot

Layout = namedtuple("Layout", ["cell", "board", "width", "height"])
# cell: pixel size of one grid cell
# board: pygame.Rect of the playing field
# width, height: window size

Button = namedtuple("Button", ["label", "rect", "command"])
# command: unbound GameEngine method the button runs

BUTTON_W, BUTTON_H = 200, 48
SMALL_BUTTON_W, SMALL_BUTTON_H = 140, 40
MIN_WIDTH = 480

_fonts: dict[int, pygame.font.Font] = {}


def make_layout(grid_size: int = config.GRID_SIZE, cell: int = config.CELL_SIZE) -> Layout:
    board_px = grid_size * cell
    width = max(MIN_WIDTH, board_px + config.MARGIN * 2)
    height = board_px + config.MARGIN + config.PANEL_HEIGHT
    board = pygame.Rect((width - board_px) // 2, config.MARGIN, board_px, board_px)
    return Layout(cell=cell, board=board, width=width, height=height)


def _centered(cx: int, cy: int, w: int, h: int) -> pygame.Rect:
    rect = pygame.Rect(0, 0, w, h)
    rect.center = (cx, cy)
    return rect


def buttons_for(phase: Phase, layout: Layout) -> list[Button]:
    """On-screen buttons for a phase; shared by drawing and click handling."""
    cx = layout.width // 2
    if phase is Phase.MENU:
        return [Button("Start Game", _centered(cx, int(layout.height * 0.5), BUTTON_W, BUTTON_H), GameEngine.start)]
    if phase is Phase.GAME_OVER:
        y = int(layout.height * 0.55)
        return [
            Button("Play Again", _centered(cx, y, BUTTON_W, BUTTON_H), GameEngine.start),
            Button("Main Menu", _centered(cx, y + BUTTON_H + 16, BUTTON_W, BUTTON_H), GameEngine.return_to_menu),
        ]
    label = "Pause" if phase is Phase.PLAYING else "Resume"
    y = layout.board.bottom + 72
    return [Button(label, _centered(cx, y, SMALL_BUTTON_W, SMALL_BUTTON_H), GameEngine.toggle_pause)]


def _font(size: int) -> pygame.font.Font:
    font = _fonts.get(size)
    if font is None:
        font = pygame.font.Font(config.FONT_NAME, size)
        _fonts[size] = font
    return font


def shutdown() -> None:
    """Drop cached fonts; call before pygame.quit() so a later init starts clean."""
    _fonts.clear()


def _text(screen: pygame.Surface, text: str, size: int, center, color=config.TEXT) -> None:
    surf = _font(size).render(text, True, color)
    screen.blit(surf, surf.get_rect(center=center))


def _draw_button(screen: pygame.Surface, button: Button, color=config.ACCENT) -> None:
    pygame.draw.rect(screen, color, button.rect)
    _text(screen, button.label, config.TEXT_SIZE, button.rect.center, config.BUTTON_TEXT)


def draw_menu(screen: pygame.Surface, layout: Layout) -> None:
    cx = layout.width // 2
    _text(screen, config.TITLE, config.TITLE_SIZE, (cx, int(layout.height * 0.3)))
    for button in buttons_for(Phase.MENU, layout):
        _draw_button(screen, button)
    help_y = int(layout.height * 0.5) + BUTTON_H + 8
    _text(screen, "Use arrow keys to move.", config.TEXT_SIZE, (cx, help_y))
    _text(screen, "Press ESC to pause/resume.", config.TEXT_SIZE, (cx, help_y + 28))


def draw_board(screen: pygame.Surface, state: Snapshot, layout: Layout) -> None:
    board, cell = layout.board, layout.cell
    for x, y in state.snake:
        rect = pygame.Rect(board.x + x * cell, board.y + y * cell, cell, cell)
        pygame.draw.rect(screen, config.SNAKE, rect)

    fx, fy = state.food
    food_rect = pygame.Rect(board.x + fx * cell, board.y + fy * cell, cell, cell)
    pygame.draw.rect(screen, config.FOOD, food_rect)

    pygame.draw.rect(screen, config.ACCENT, board.inflate(config.BORDER * 2, config.BORDER * 2), config.BORDER)

    _text(screen, f"Score: {state.score}", config.TEXT_SIZE, (layout.width // 2, board.bottom + 24))
    for button in buttons_for(state.phase, layout):
        _draw_button(screen, button)

    if state.phase is Phase.PAUSED:
        overlay = pygame.Surface(board.size, pygame.SRCALPHA)
        overlay.fill(config.OVERLAY)
        screen.blit(overlay, board.topleft)
        _text(screen, "Paused", config.HEADING_SIZE, board.center)


def draw_game_over(screen: pygame.Surface, state: Snapshot, layout: Layout) -> None:
    cx = layout.width // 2
    _text(screen, "Game Over", config.HEADING_SIZE, (cx, int(layout.height * 0.3)))
    _text(screen, f"Your Score: {state.score}", config.TEXT_SIZE, (cx, int(layout.height * 0.4)))
    play_again, main_menu = buttons_for(Phase.GAME_OVER, layout)
    _draw_button(screen, play_again)
    _draw_button(screen, main_menu, config.SNAKE)


def draw_state(screen: pygame.Surface, state: Snapshot, layout: Layout) -> None:
    screen.fill(config.BACKGROUND)

    if state.phase is Phase.MENU:
        draw_menu(screen, layout)
    elif state.phase is Phase.GAME_OVER:
        draw_game_over(screen, state, layout)
    else:
        draw_board(screen, state, layout)

    pygame.display.flip()
