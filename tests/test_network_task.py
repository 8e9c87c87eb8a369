import asyncio

import pytest

from asyncnet.errors import CANCELLED_ERROR_CODE, NetworkRuntimeError
from asyncnet.network_task import NetworkTask, StopSource
from asyncnet.response import Response


def test_stop_source_request_stop_once():
    source = StopSource()
    token = source.token()
    assert source.stop_requested() is False
    assert token.stop_requested() is False
    assert source.request_stop() is True
    assert source.request_stop() is False
    assert source.stop_requested() is True
    assert token.stop_requested() is True


def test_tokens_share_source():
    source = StopSource()
    first, second = source.token(), source.token()
    source.request_stop()
    assert first.stop_requested() and second.stop_requested()


def test_result_before_await_raises():
    task = NetworkTask(lambda token: asyncio.sleep(0))
    assert task.done() is False
    with pytest.raises(RuntimeError):
        task.result()


@pytest.mark.asyncio
async def test_await_returns_response():
    response = Response(200, "ok")

    async def perform(token):
        await asyncio.sleep(0)
        return response

    task = NetworkTask(perform)
    assert await task is response
    assert task.done() is True
    assert task.result() is response


@pytest.mark.asyncio
async def test_started_lazily():
    started = []

    async def perform(token):
        started.append(True)
        return Response(204)

    task = NetworkTask(perform)
    await asyncio.sleep(0)
    assert started == []
    result = await task
    assert started == [True]
    assert result.status_code == 204


@pytest.mark.asyncio
async def test_await_twice_runs_once():
    calls = []

    async def perform(token):
        calls.append(1)
        return Response(200, "body")

    task = NetworkTask(perform)
    first = await task
    second = await task
    assert first is second
    assert calls == [1]


@pytest.mark.asyncio
async def test_error_is_stored_and_reraised():
    async def perform(token):
        raise NetworkRuntimeError("failed", 7)

    task = NetworkTask(perform)
    with pytest.raises(NetworkRuntimeError) as first:
        await task
    assert task.done() is True
    with pytest.raises(NetworkRuntimeError) as second:
        task.result()
    assert first.value is second.value
    assert second.value.code == 7


@pytest.mark.asyncio
async def test_request_stop_seen_by_coroutine():
    async def perform(token):
        if token.stop_requested():
            raise NetworkRuntimeError("cancelled", CANCELLED_ERROR_CODE)
        return Response(200)

    task = NetworkTask(perform)
    assert task.request_stop() is True
    assert task.request_stop() is False
    with pytest.raises(NetworkRuntimeError) as info:
        await task
    assert info.value.code == CANCELLED_ERROR_CODE


@pytest.mark.asyncio
async def test_stop_requested_while_running():
    gate = asyncio.Event()

    async def perform(token):
        await gate.wait()
        return Response(499 if token.stop_requested() else 200)

    task = NetworkTask(perform)
    runner = asyncio.ensure_future(_await(task))
    await asyncio.sleep(0)
    task.request_stop()
    gate.set()
    response = await runner
    assert response.status_code == 499


async def _await(task):
    return await task