from __future__ import annotations

from . import config


class TickTimer:
    """Fixed-interval tick scheduler driven by frame time.

    The game loop feeds it the milliseconds elapsed since the previous frame
    and fires one engine tick per interval that has passed. Stopping it
    discards any partial interval, so a resumed game waits a full interval
    before its first move.
    """

    def __init__(self, interval_ms: float = config.TICK_MS, max_catchup: int = config.MAX_CATCHUP_TICKS):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.max_catchup = max_catchup
        self.running = False
        self._elapsed = 0.0

    def start(self) -> None:
        if self.running:
            return
        self.running = True
        self._elapsed = 0.0

    def stop(self) -> None:
        self.running = False
        self._elapsed = 0.0

    def advance(self, dt_ms: float) -> int:
        """Return how many ticks are due after ``dt_ms`` more milliseconds."""
        if not self.running:
            return 0
        self._elapsed += dt_ms
        due = int(self._elapsed // self.interval_ms)
        self._elapsed -= due * self.interval_ms
        return min(due, self.max_catchup)
