"""Request and response middleware pipelines.

Request middleware transforms the transport options dict before the request is
sent and runs in registration order. Response middleware transforms the
response and runs in reverse registration order, so the last registered layer
sees the response first (onion ordering).

Middleware may be plain functions or coroutine functions:

```python
async def add_auth(options: dict) -> dict:
    return {**options, "headers": {**options.get("headers", {}), "Authorization": "Bearer ..."}}


def tag_response(response: httpx.Response) -> httpx.Response:
    response.headers["X-Seen"] = "1"
    return response
```

A middleware that raises stops its pipeline at once; the exception reaches the
caller unchanged.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeAlias

import httpx

logger = logging.getLogger(__name__)

TransportOptions: TypeAlias = dict[str, Any]
RequestMiddleware: TypeAlias = Callable[[TransportOptions], TransportOptions | Awaitable[TransportOptions]]
ResponseMiddleware: TypeAlias = Callable[[httpx.Response], httpx.Response | Awaitable[httpx.Response]]


def _middleware_name(middleware: Callable[..., Any]) -> str:
    return getattr(middleware, "__qualname__", None) or repr(middleware)


async def _call(middleware: Callable[[Any], Any], value: Any) -> Any:
    result = middleware(value)
    if inspect.isawaitable(result):
        result = await result
    return result


async def run_request_middleware(
    options: TransportOptions, middleware: Sequence[RequestMiddleware]
) -> TransportOptions:
    """Thread ``options`` through each request middleware in registration order."""
    for step in middleware:
        logger.debug(f"Running request middleware {_middleware_name(step)}")
        options = await _call(step, options)
    return options


async def run_response_middleware(
    response: httpx.Response, middleware: Sequence[ResponseMiddleware]
) -> httpx.Response:
    """Thread ``response`` through each response middleware, last registered first."""
    for step in reversed(middleware):
        logger.debug(f"Running response middleware {_middleware_name(step)}")
        response = await _call(step, response)
    return response
