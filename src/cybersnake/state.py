from __future__ import annotations

from collections import namedtuple
from enum import Enum


class Phase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


Snapshot = namedtuple("Snapshot", ["snake", "direction", "food", "score", "phase"])
# snake: tuple[(x, y)], head is first element.
# direction: (dx, dy)
# food: (x, y)
# score: int
# phase: Phase


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


def wrap(pos: tuple[int, int], grid_size: int) -> tuple[int, int]:
    """Toroidal wrap, one axis at a time: below 0 re-enters at the far edge, past the edge at 0."""
    x, y = pos
    if x < 0:
        x = grid_size - 1
    elif x >= grid_size:
        x = 0
    if y < 0:
        y = grid_size - 1
    elif y >= grid_size:
        y = 0
    return (x, y)


def is_opposite(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return add_vectors(a, b) == (0, 0)


def in_bounds(pos: tuple[int, int], grid_size: int) -> bool:
    x, y = pos
    return 0 <= x < grid_size and 0 <= y < grid_size
