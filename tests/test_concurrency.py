"""Tests for bounded fan-out."""

import asyncio

import pytest

from doxbook.concurrency import DEFAULT_CONCURRENCY, run_bounded


class TestRunBounded:
    """Tests for run_bounded."""

    @pytest.mark.asyncio
    async def test_results_keep_input_order(self):
        """Results follow input order even when completion order differs."""

        async def slow_first(n):
            await asyncio.sleep(0.01 * (5 - n))
            return n * 10

        assert await run_bounded(slow_first, [1, 2, 3, 4]) == [10, 20, 30, 40]

    @pytest.mark.asyncio
    async def test_limit_is_respected(self):
        """No more than ``limit`` operations run at once."""
        in_flight = 0
        peak = 0

        async def track(n):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return n

        results = await run_bounded(track, range(10), limit=3)

        assert results == list(range(10))
        assert peak == 3

    @pytest.mark.asyncio
    async def test_empty_input(self):
        async def never(n):
            raise AssertionError("should not be called")

        assert await run_bounded(never, []) == []

    @pytest.mark.asyncio
    async def test_first_failure_propagates_and_cancels_the_rest(self):
        """A failure is raised and unfinished operations are cancelled."""
        finished = []

        async def work(n):
            if n == 0:
                raise OSError("disk on fire")
            await asyncio.sleep(1)
            finished.append(n)
            return n

        with pytest.raises(OSError, match="disk on fire"):
            await run_bounded(work, [0, 1, 2], limit=3)

        assert finished == []

    @pytest.mark.asyncio
    async def test_earliest_failure_in_input_order_wins(self):
        """When several items fail together, the first one in input order is raised."""

        async def work(n):
            raise ValueError(f"item {n}")

        with pytest.raises(ValueError, match="item 0"):
            await run_bounded(work, range(3), limit=3)

    @pytest.mark.asyncio
    async def test_invalid_limit(self):
        async def noop(n):
            return n

        with pytest.raises(ValueError, match="at least 1"):
            await run_bounded(noop, [1], limit=0)

    def test_default_limit(self):
        assert DEFAULT_CONCURRENCY == 16
