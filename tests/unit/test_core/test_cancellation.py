"""Tests for CancellationToken."""

import asyncio

import pytest


@pytest.mark.asyncio
async def test_guard_returns_result():
    from repocleaner.core.cancellation import CancellationToken

    async def work():
        return 42

    token = CancellationToken()

    assert await token.guard(work()) == 42


@pytest.mark.asyncio
async def test_guard_raises_when_already_cancelled():
    from repocleaner.core.cancellation import CancellationToken
    from repocleaner.core.errors import OperationCancelled

    async def work():
        return 42

    token = CancellationToken("sync")
    token.cancel()

    with pytest.raises(OperationCancelled):
        await token.guard(work())


@pytest.mark.asyncio
async def test_cancel_aborts_pending_await():
    from repocleaner.core.cancellation import CancellationToken
    from repocleaner.core.errors import OperationCancelled

    started = asyncio.Event()

    async def slow():
        started.set()
        await asyncio.sleep(10)

    token = CancellationToken()
    task = asyncio.ensure_future(token.guard(slow()))
    await started.wait()

    token.cancel()

    with pytest.raises(OperationCancelled):
        await task


@pytest.mark.asyncio
async def test_outer_cancellation_propagates_as_cancelled_error():
    from repocleaner.core.cancellation import CancellationToken

    started = asyncio.Event()

    async def slow():
        started.set()
        await asyncio.sleep(10)

    token = CancellationToken()
    task = asyncio.ensure_future(token.guard(slow()))
    await started.wait()

    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert token.cancelled is False


def test_raise_if_cancelled():
    from repocleaner.core.cancellation import CancellationToken
    from repocleaner.core.errors import OperationCancelled

    token = CancellationToken()
    token.raise_if_cancelled()

    token.cancel()
    token.cancel()

    assert token.cancelled is True
    with pytest.raises(OperationCancelled):
        token.raise_if_cancelled()


def test_operation_cancelled_is_not_a_reportable_error():
    from repocleaner.core.errors import OperationCancelled, RepoCleanerError

    assert not issubclass(OperationCancelled, RepoCleanerError)
