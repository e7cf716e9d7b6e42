"""Reading-stream controller: generates, keeps and publishes simulated readings"""
import asyncio
import math
import random
from datetime import datetime
from typing import Callable, Optional, Set

from config.logger import logger
from config.settings import (
    READING_MAX,
    READING_MIN,
    TICK_INTERVAL_SECONDS,
    TIMESTAMP_FORMAT,
    WINDOW_SIZE,
)
from models.schemas import DashboardState, Reading, Summary
from services.storage import ReadingWindow
from services.summary import compute_summary


class ReadingStreamController:
    """
    Owns the reading window and the running/paused flag.

    A single asyncio task ticks every `interval` seconds. While running,
    each tick prepends a new random reading to the window and publishes a
    snapshot to subscribers. While paused the timer keeps firing but
    ticks do nothing.
    """

    def __init__(
        self,
        interval: float = TICK_INTERVAL_SECONDS,
        capacity: int = WINDOW_SIZE,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.interval = interval
        self.window = ReadingWindow(capacity)
        self.rng = rng or random.Random()
        self.clock = clock

        self._running = True
        self._task: Optional[asyncio.Task] = None
        self._subscribers: Set[asyncio.Queue] = set()

    # ---- Lifecycle ----

    def start(self):
        """Start the periodic tick task on the running event loop"""
        if self.is_started:
            logger.warning("Reading stream already started")
            return
        self._task = asyncio.create_task(self._run(), name="reading-stream")
        logger.info(f"Reading stream started (interval={self.interval}s)")

    async def stop(self):
        """Cancel the periodic task and wait for it to finish"""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            # Only the tick task's own cancellation is expected here
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
        logger.info("Reading stream stopped")

    @property
    def is_started(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _run(self):
        while True:
            try:
                self.tick()
            except Exception:
                logger.exception("Reading stream tick failed")
            await asyncio.sleep(self.interval)

    # ---- Mutation ----

    def generate_reading(self) -> Reading:
        """New reading with a value in [READING_MIN, READING_MAX)"""
        value = READING_MIN + self.rng.random() * (READING_MAX - READING_MIN)
        # float rounding can land exactly on the upper bound
        value = min(value, math.nextafter(READING_MAX, READING_MIN))
        timestamp = self.clock().strftime(TIMESTAMP_FORMAT)
        return Reading(timestamp=timestamp, value=value)

    def tick(self) -> Optional[Reading]:
        """One cycle of the stream. Returns the new reading, or None when paused."""
        if not self._running:
            return None

        reading = self.generate_reading()
        self.window.add(reading)
        logger.debug(f"Reading {reading.timestamp} {reading.value:.2f} (window={len(self.window)})")
        self._publish()
        return reading

    def toggle_run_state(self) -> bool:
        """Flip running/paused and return the new state"""
        self._running = not self._running
        logger.info(f"Reading stream {'resumed' if self._running else 'paused'}")
        self._publish()
        return self._running

    # ---- Queries ----

    @property
    def running(self) -> bool:
        return self._running

    @property
    def readings(self) -> tuple[Reading, ...]:
        return self.window.snapshot()

    def current_summary(self) -> Summary:
        return compute_summary(self.window.snapshot())

    def snapshot(self) -> DashboardState:
        readings = self.window.snapshot()
        return DashboardState(
            running=self._running,
            readings=readings,
            summary=compute_summary(readings),
        )

    # ---- Publish / subscribe ----

    def subscribe(self) -> asyncio.Queue:
        """Queue that always holds the latest unread snapshot"""
        queue: asyncio.Queue = asyncio.Queue(maxsize=1)
        queue.put_nowait(self.snapshot())
        self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue):
        self._subscribers.discard(queue)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _publish(self):
        if not self._subscribers:
            return
        state = self.snapshot()
        for queue in self._subscribers:
            # Replace any unread snapshot with the newer one
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(state)
