"""
Unit tests for AsyncioScheduler.
"""

import asyncio
import logging

import pytest

from feed_auth.auth_token.scheduler import AsyncioScheduler


class TestAsyncioScheduler:
    """Test class for AsyncioScheduler functionality."""

    def setup_method(self):
        self.scheduler = AsyncioScheduler()

    @pytest.mark.asyncio
    async def test_task_runs_after_delay_not_before(self):
        calls = []

        async def task():
            calls.append(asyncio.get_running_loop().time())

        start = asyncio.get_running_loop().time()
        self.scheduler.schedule(0.05, task)

        assert self.scheduler.pending == 1
        await asyncio.sleep(0.01)
        assert calls == []

        await self.scheduler.wait_idle()
        assert len(calls) == 1
        assert calls[0] - start >= 0.04
        assert self.scheduler.pending == 0

    @pytest.mark.asyncio
    async def test_schedule_does_not_block_caller(self):
        async def task():
            return None

        self.scheduler.schedule(10, task)
        # Returned synchronously; timer still armed
        assert self.scheduler.pending == 1
        await self.scheduler.cancel_all()
        assert self.scheduler.pending == 0

    @pytest.mark.asyncio
    async def test_failing_task_is_logged_not_raised(self, caplog):
        async def task():
            raise RuntimeError("boom")

        with caplog.at_level(logging.WARNING):
            self.scheduler.schedule(0, task)
            await self.scheduler.wait_idle()

        assert "Scheduled run failed type=RuntimeError error=boom" in caplog.text

    @pytest.mark.asyncio
    async def test_overlapping_schedules_all_fire(self):
        calls = []

        async def task():
            calls.append(1)

        self.scheduler.schedule(0, task)
        self.scheduler.schedule(0, task)
        assert self.scheduler.pending == 2
        await self.scheduler.wait_idle()
        assert calls == [1, 1]

    @pytest.mark.asyncio
    async def test_wait_idle_follows_rescheduled_runs(self):
        runs = []

        async def task():
            runs.append(1)
            if len(runs) < 3:
                self.scheduler.schedule(0, task)

        self.scheduler.schedule(0, task)
        await asyncio.wait_for(self.scheduler.wait_idle(), timeout=1)
        assert len(runs) == 3

    @pytest.mark.asyncio
    async def test_cancel_all_prevents_run(self):
        calls = []

        async def task():
            calls.append(1)

        self.scheduler.schedule(0.05, task)
        await self.scheduler.cancel_all()
        await asyncio.sleep(0.1)
        assert calls == []

    def test_schedule_outside_loop_raises(self):
        async def task():
            return None

        with pytest.raises(RuntimeError):
            self.scheduler.schedule(1, task)
