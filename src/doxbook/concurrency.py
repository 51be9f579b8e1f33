"""Bounded fan-out for batches of asynchronous I/O."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 16

T = TypeVar("T")
R = TypeVar("R")


async def run_bounded(
    func: Callable[[T], Awaitable[R]],
    items: Iterable[T],
    limit: int | None = None,
) -> list[R]:
    """Apply an async function to every item with at most ``limit`` in flight.

    Every item is scheduled up front; a semaphore keeps no more than
    ``limit`` of them running at once. The call returns only once all
    items have completed, with results in input order.

    On the first failure the operations that have not finished are
    cancelled and the exception is re-raised.

    Args:
        func: Coroutine function applied to each item
        items: Items to process
        limit: Maximum concurrent operations (default: DEFAULT_CONCURRENCY)

    Returns:
        Results of ``func`` in the same order as ``items``

    Raises:
        ValueError: If limit is less than 1
    """
    limit = DEFAULT_CONCURRENCY if limit is None else limit
    if limit < 1:
        raise ValueError(f"concurrency limit must be at least 1, got {limit}")

    semaphore = asyncio.Semaphore(limit)

    async def worker(item: T) -> R:
        async with semaphore:
            return await func(item)

    tasks = [asyncio.create_task(worker(item)) for item in items]
    if not tasks:
        return []

    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)

    if pending:
        logger.debug(f"Cancelling {len(pending)} pending operations after failure")
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    for task in tasks:
        if task in done and task.exception() is not None:
            raise task.exception()

    return [task.result() for task in tasks]
