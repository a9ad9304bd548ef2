"""
Timing utilities for DynamicBuffer.
"""

import time
from typing import Optional
from contextlib import contextmanager

from DynamicBuffer.utils.logging import get_logger

class Timer:
    """Measures elapsed time and throughput of codec runs."""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self.start_time: Optional[float] = None
        self.elapsed: float = 0.0

    def start(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def stop(self) -> float:
        if self.start_time is None:
            raise RuntimeError("Timer has not been started.")
        self.elapsed = time.perf_counter() - self.start_time
        self.start_time = None
        return self.elapsed

    def throughput(self, num_bytes: int) -> float:
        """Gets bytes per second over the last measured interval."""
        if self.elapsed <= 0.0:
            return 0.0
        return num_bytes / self.elapsed


@contextmanager
def timing_context(name: Optional[str] = None):
    """Context manager for timing a code block."""
    timer = Timer(name=name).start()
    try:
        yield timer
    finally:
        elapsed = timer.stop()
        if name:
            get_logger().info(f"[Timing Context] {name}: {elapsed:.4f} seconds")
