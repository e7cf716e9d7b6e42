"""Storage service for the reading window (in-memory only)"""
from collections import deque
from typing import Iterator

from config.settings import WINDOW_SIZE
from models.schemas import Reading


class ReadingWindow:
    """Bounded newest-first sequence of readings.

    New readings are prepended; once capacity is exceeded the oldest
    (tail) reading is evicted.
    """

    def __init__(self, capacity: int = WINDOW_SIZE):
        if capacity < 1:
            raise ValueError(f"Window capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._readings: deque = deque(maxlen=capacity)

    def add(self, reading: Reading):
        """Add a reading at the head of the window"""
        self._readings.appendleft(reading)

    def snapshot(self) -> tuple[Reading, ...]:
        """Immutable copy of the window, newest first"""
        return tuple(self._readings)

    def __len__(self) -> int:
        return len(self._readings)

    def __iter__(self) -> Iterator[Reading]:
        return iter(self.snapshot())
