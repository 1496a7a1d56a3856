"""Capping the frame rate and measuring the frame time."""

from __future__ import annotations

import math
import time
from collections.abc import Callable

from .config import FPS_CAP


class FrameClock:
    """Waits out the rest of each frame and records the frame rate.

    ``counter`` returns a tick count and ``frequency`` is ticks per second.
    """

    def __init__(
        self,
        fps_cap: float = FPS_CAP,
        counter: Callable[[], int] = time.perf_counter_ns,
        frequency: float = 1e9,
    ) -> None:
        if fps_cap <= 0:
            raise ValueError(f"frame rate cap must be positive, got {fps_cap}")
        if frequency <= 0:
            raise ValueError(f"counter frequency must be positive, got {frequency}")
        self.fps_cap = fps_cap
        self.counter = counter
        self.frequency = frequency
        self.fps = 0.0
        self.frame_time = 0.0
        self._last: int | None = None

    def tick(self) -> float:
        """End the frame, waiting if it came in under the cap; returns its length in seconds."""
        start = self.counter()
        if self._last is None:
            self._last = start
        elapsed = (start - self._last) / self.frequency
        wait_time = 1.0 / self.fps_cap - elapsed
        while (self.counter() - start) / self.frequency < wait_time:
            pass
        end = self.counter()
        total = (end - self._last) / self.frequency
        self.fps = 1.0 / total if total > 0 else math.inf
        self.frame_time = total
        self._last = end
        return total