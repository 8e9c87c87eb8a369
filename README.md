# asyncnet

Building blocks for asynchronous HTTP clients on `asyncio`:

- `asyncnet.request`: `Request`, `GetRequest`, `PostRequest`, `HeadRequest`
  and `PostMultipartRequest` describe a request as a URL plus a set of
  transfer options (`Option`): headers, timeout, redirects, cookie file,
  verbosity and body.
- `asyncnet.session`: `AsyncSession` keeps shared defaults and creates
  requests that start from them.
- `asyncnet.network_task`: `NetworkTask` runs a coroutine function lazily on
  first await and keeps its outcome; it can be asked to stop through a
  `StopSource` / `StopToken` pair.
- `asyncnet.response`: `Response` holds a status code and a body.
- `asyncnet.async_queue`: `AsyncQueue` is a FIFO queue with a non-waiting
  `pop()` and a waiting `pop_wait()`.
- `asyncnet.net_types`: `UrlParameters`, `url_escape`, `parse_json_object`,
  `MultipartContentPart` and `MultipartFilePart`.
- `asyncnet.json_conversions`: `duration_from_json`, `duration_to_json`,
  `time_point_from_json` and `time_point_to_json` convert JSON integers
  counted in a `TimeUnit`.
- `asyncnet.errors`: `NetworkError`, `NetworkLogicError` and
  `NetworkRuntimeError`, each with a numeric `code`, plus the codes
  `TIMEOUT_ERROR_CODE` and `CANCELLED_ERROR_CODE`.

## What it does not do

The package does not send anything over the network. There is no transport
that performs a `Request`: requests are option containers, and a
`NetworkTask` runs whatever coroutine function you give it. Connecting these
to an HTTP client is left to the caller.

## Installation

```
pip install asyncnet
```

## Building a request

```python
from datetime import timedelta

from asyncnet.request import GetRequest, Option, Request
from asyncnet.net_types import UrlParameters, url_escape

request = GetRequest("https://example.com/search")
request.set_headers(["User-Agent: demo"])
request.add_headers(["Accept: application/json"])
request.set_max_redirects(Request.INFINITE_REDIRECTS)
request.set_timeout(timedelta(seconds=30))
request.set_url_parameters(UrlParameters([("q", url_escape("a b"))]))

print(request.get_option(Option.URL))          # https://example.com/search?q=a%20b
print(request.get_option(Option.HTTP_HEADER))  # ['User-Agent: demo', 'Accept: application/json']
print(request.make_request_handle())           # every option set, in order
```

`set_max_redirects(None)` turns redirect following off; `set_timeout(None)`
stores a timeout of 0, meaning no limit. Timeouts are kept in whole seconds.
`set_url` drops any URL parameters applied earlier. `UrlParameters` does not
escape keys or values; use `url_escape` for that.

`PostRequest(url, data)` stores the body and its size in bytes,
`HeadRequest(url)` asks for no body, and `PostMultipartRequest(url, forms)`
holds `MultipartContentPart` / `MultipartFilePart` entries, extended with
`add_form`.

## Sessions

```python
from datetime import timedelta

from asyncnet.session import AsyncSession
from asyncnet.request import PostRequest

session = AsyncSession()
session.add_default_header("User-Agent: demo")
session.set_timeout(timedelta(seconds=30))

post = session.make_request(PostRequest, "https://example.com/post", "a=1&b=2")
```

A session keeps cookies in memory (`Request.COOKIE_MEMORY`) unless
`set_cookie_file` says otherwise. Each request made through `make_request`
starts from a copy of the session's options; later changes to the session do
not affect requests already made.

## Stoppable tasks

```python
import asyncio

from asyncnet.errors import CANCELLED_ERROR_CODE, NetworkRuntimeError
from asyncnet.network_task import NetworkTask
from asyncnet.response import Response


async def job(stop_token):
    if stop_token.stop_requested():
        raise NetworkRuntimeError("cancelled", CANCELLED_ERROR_CODE)
    return Response(200, "ok")


async def main():
    task = NetworkTask(job)
    task.request_stop()
    try:
        await task
    except NetworkRuntimeError as error:
        print(error.code)  # 42

asyncio.run(main())
```

The coroutine function is called only when the task is first awaited.
Awaiting a finished task again returns the same response or raises the same
error; `result()` does the same without awaiting and raises `RuntimeError`
if the task has not finished.

## Async queue

```python
import asyncio

from asyncnet.async_queue import AsyncQueue


async def main():
    queue = AsyncQueue()
    await queue.push(10)
    print(await queue.pop())       # 10
    print(await queue.pop())       # None
    await queue.emplace(100)       # built with the queue's factory
    print(await queue.pop_wait())  # 100

asyncio.run(main())
```

A value pushed while coroutines are waiting in `pop_wait()` goes to the
oldest waiter.

## JSON helpers

```python
from datetime import timedelta

from asyncnet.json_conversions import TimeUnit, duration_from_json, time_point_to_json
from asyncnet.net_types import parse_json_object

duration_from_json(120)                                        # timedelta(seconds=120)
duration_from_json(13, TimeUnit.MINUTES)                       # timedelta(minutes=13)
parse_json_object('{"args": {}}')                              # {'args': {}}
```

Non-integer values, and negative values when `unsigned=True`, raise
`JsonConversionError`. `parse_json_object` raises `ValueError` when the text
is not a JSON object.

## Running the tests

```
pip install "asyncnet[test]"
pytest
```