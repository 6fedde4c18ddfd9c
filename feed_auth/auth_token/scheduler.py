"""Fire-and-forget scheduling of re-authentication runs."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from ..utils import format_duration

ScheduledTask = Callable[[], Awaitable[Any]]


class Scheduler(Protocol):
    """Capability to run ``task`` once after ``delay_seconds``.

    ``schedule`` must not block and the caller never observes the task.
    """

    def schedule(self, delay_seconds: float, task: ScheduledTask) -> None: ...


class AsyncioScheduler:
    """Scheduler running delayed tasks on the current event loop.

    Each scheduled task is retained until it finishes so it is not garbage
    collected mid-flight, and its exceptions are logged rather than raised.
    Overlapping schedules are not deduplicated.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> int:
        """Number of scheduled runs not finished yet."""
        return len(self._tasks)

    def schedule(self, delay_seconds: float, task: ScheduledTask) -> None:
        """Run ``task`` after ``delay_seconds`` without waiting for it.

        Raises:
            RuntimeError: If called outside a running event loop.
        """
        loop = asyncio.get_running_loop()
        handle: asyncio.Task[Any] = loop.create_task(self._run_later(delay_seconds, task))
        self._tasks.add(handle)
        handle.add_done_callback(self._tasks.discard)
        logging.debug(
            f"⏰ Scheduled background run in {format_duration(delay_seconds)} pending={self.pending}"
        )

    async def _run_later(self, delay_seconds: float, task: ScheduledTask) -> None:
        await asyncio.sleep(delay_seconds)
        try:
            await task()
        except asyncio.CancelledError:
            raise
        except Exception as e:  # noqa: BLE001
            logging.warning(
                f"⚠️ Scheduled run failed type={type(e).__name__} error={str(e)}"
            )

    async def wait_idle(self) -> None:
        """Wait until no scheduled run is pending.

        Runs that schedule further runs keep this waiting.
        """
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def cancel_all(self) -> None:
        """Cancel every pending run and wait for the cancellations to land."""
        tasks = list(self._tasks)
        for t in tasks:
            t.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            logging.debug(f"⏹️ Cancelled scheduled runs count={len(tasks)}")
