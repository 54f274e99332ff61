"""Cooperative cancellation for chains of asynchronous requests."""

import asyncio
import logging
from typing import Awaitable, Set, TypeVar

from repocleaner.core.errors import OperationCancelled

logger = logging.getLogger("RepoCleaner.Cancellation")

T = TypeVar("T")


class CancellationToken:
    """Marks a unit of work as superseded and aborts its in-flight awaits.

    Every await that belongs to the unit of work goes through ``guard()``.
    Once ``cancel()`` is called, the guarded tasks are cancelled and every
    later ``guard()`` or ``raise_if_cancelled()`` raises OperationCancelled.
    Must be used from the event loop that runs the guarded work.
    """

    def __init__(self, name: str = "operation"):
        self.name = name
        self._cancelled = False
        self._pending: Set[asyncio.Future] = set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        logger.debug(
            f"Cancelling {self.name} ({len(self._pending)} pending request(s))"
        )
        for future in list(self._pending):
            future.cancel()

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise OperationCancelled(self.name)

    async def guard(self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable`` unless or until the token is cancelled."""
        if self._cancelled:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise OperationCancelled(self.name)

        future = asyncio.ensure_future(awaitable)
        self._pending.add(future)
        try:
            result = await future
        except asyncio.CancelledError:
            if self._cancelled:
                raise OperationCancelled(self.name) from None
            raise
        finally:
            self._pending.discard(future)

        # The token may have been cancelled after the result arrived
        self.raise_if_cancelled()
        return result
