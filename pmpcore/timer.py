"""A simple stopwatch measuring elapsed wall-clock time in milliseconds."""

from __future__ import annotations

import time
import warnings


class Timer:
    """Stopwatch that accumulates time across start/stop segments."""

    def __init__(self) -> None:
        self._start_time = 0.0
        self._elapsed = 0.0
        self._running = False

    def start(self) -> None:
        """Reset the accumulated time and start measuring."""
        self._elapsed = 0.0
        self.cont()

    def cont(self) -> None:
        """Resume measuring, keeping the accumulated time."""
        self._start_time = time.perf_counter()
        self._running = True

    def stop(self) -> "Timer":
        """Stop measuring and add the segment to the accumulated time."""
        self._elapsed += time.perf_counter() - self._start_time
        self._running = False
        return self

    def elapsed(self) -> float:
        """Return the accumulated time in milliseconds."""
        if self._running:
            warnings.warn("stop the timer before calling elapsed()", RuntimeWarning, stacklevel=2)
        return 1000.0 * self._elapsed

    def __str__(self) -> str:
        return f"{self.elapsed():g} ms"

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()