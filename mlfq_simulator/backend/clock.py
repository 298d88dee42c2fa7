from __future__ import annotations

import time
from typing import Iterable, Iterator, Optional


class VirtualClock:
    """Deterministic clock that moves forward on every read.

    Each call to ``now()`` returns the current time and then advances it,
    either by a fixed ``step`` or by the next value of ``steps`` (falling
    back to ``step`` once the sequence runs out).
    """

    def __init__(self, step: float = 1.0, start: float = 0.0, steps: Optional[Iterable[float]] = None):
        if step <= 0:
            raise ValueError("step must be positive")
        self.step = step
        self.time = start
        self._steps: Optional[Iterator[float]] = iter(steps) if steps is not None else None

    def now(self) -> float:
        current = self.time
        self.time += self._next_step()
        return current

    def advance(self, amount: float) -> None:
        if amount < 0:
            raise ValueError("clock cannot move backwards")
        self.time += amount

    def _next_step(self) -> float:
        if self._steps is not None:
            step = next(self._steps, None)
            if step is not None:
                if step < 0:
                    raise ValueError("clock cannot move backwards")
                return step
            self._steps = None
        return self.step


class WallClock:
    """Wall clock in milliseconds since the epoch."""

    def now(self) -> float:
        return time.time() * 1000.0
