from __future__ import annotations

import random
from collections import deque

from . import config
from .state import Phase, Snapshot, add_vectors, in_bounds, is_opposite, wrap


class GameEngine:
    """Owns the board, the snake, the food, the score and the lifecycle phase.

    The presentation layer drives it with commands (``start``, ``toggle_pause``,
    ``return_to_menu``, ``set_direction``, ``tick``) and reads ``snapshot()``
    back, or registers a listener to be handed a snapshot after each change.
    Commands that do not apply to the current phase are ignored.
    """

    def __init__(
        self,
        grid_size: int = config.GRID_SIZE,
        initial_snake=config.INITIAL_SNAKE,
        initial_direction: tuple[int, int] = config.INITIAL_DIRECTION,
        initial_food: tuple[int, int] = config.INITIAL_FOOD,
        rng: random.Random | None = None,
    ):
        if grid_size < 1:
            raise ValueError(f"grid_size must be at least 1, got {grid_size}")
        initial_snake = tuple(tuple(p) for p in initial_snake)
        if not initial_snake:
            raise ValueError("initial_snake must have at least one segment")
        for pos in (*initial_snake, tuple(initial_food)):
            if not in_bounds(pos, grid_size):
                raise ValueError(f"position {pos} is outside a {grid_size}x{grid_size} grid")
        if len(set(initial_snake)) != len(initial_snake):
            raise ValueError("initial_snake overlaps itself")
        if tuple(initial_direction) not in config.DIRECTIONS:
            raise ValueError(f"not a unit direction: {initial_direction}")

        self.grid_size = grid_size
        self._initial_snake = initial_snake
        self._initial_direction = tuple(initial_direction)
        self._initial_food = tuple(initial_food)
        self._rng = rng or random.Random()
        self._listeners = []

        self._phase = Phase.MENU
        self._reset()

    def _reset(self) -> None:
        self._snake = deque(self._initial_snake)
        self._direction = self._initial_direction
        self._food = self._initial_food
        self._score = 0

    # --- State read interface ---

    @property
    def snake(self) -> tuple[tuple[int, int], ...]:
        return tuple(self._snake)

    @property
    def direction(self) -> tuple[int, int]:
        return self._direction

    @property
    def food(self) -> tuple[int, int]:
        return self._food

    @property
    def score(self) -> int:
        return self._score

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_running(self) -> bool:
        """True while the tick timer should be firing."""
        return self._phase is Phase.PLAYING

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self._snake),
            direction=self._direction,
            food=self._food,
            score=self._score,
            phase=self._phase,
        )

    def add_listener(self, callback) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback) -> None:
        self._listeners.remove(callback)

    def _changed(self) -> Snapshot:
        snap = self.snapshot()
        for callback in list(self._listeners):
            callback(snap)
        return snap

    # --- Commands ---

    def start(self) -> Snapshot:
        """Hard reset into a fresh game, whatever the current phase."""
        self._reset()
        self._phase = Phase.PLAYING
        return self._changed()

    def toggle_pause(self) -> Snapshot:
        if self._phase is Phase.PLAYING:
            self._phase = Phase.PAUSED
        elif self._phase is Phase.PAUSED:
            self._phase = Phase.PLAYING
        else:
            return self.snapshot()
        return self._changed()

    def return_to_menu(self) -> Snapshot:
        # Snake and score are kept; they are only drawn while playing or paused.
        if self._phase not in (Phase.GAME_OVER, Phase.PAUSED):
            return self.snapshot()
        self._phase = Phase.MENU
        return self._changed()

    def set_direction(self, requested) -> Snapshot:
        if self._phase is not Phase.PLAYING:
            return self.snapshot()
        requested = tuple(requested)
        if requested not in config.DIRECTIONS:
            return self.snapshot()
        if requested == self._direction or is_opposite(requested, self._direction):
            return self.snapshot()
        self._direction = requested
        return self._changed()

    def tick(self) -> Snapshot:
        """Advance the snake one cell."""
        if self._phase is not Phase.PLAYING:
            return self.snapshot()

        new_head = wrap(add_vectors(self._snake[0], self._direction), self.grid_size)

        # Checked against the whole pre-move body, tail included.
        if new_head in self._snake:
            self._phase = Phase.GAME_OVER
            return self._changed()

        self._snake.appendleft(new_head)
        if new_head == self._food:
            self._score += 1
            self._food = self._roll_food()
        else:
            self._snake.pop()
        return self._changed()

    def _roll_food(self) -> tuple[int, int]:
        # Uniform over the whole grid; may land on the snake.
        return (
            self._rng.randrange(self.grid_size),
            self._rng.randrange(self.grid_size),
        )
