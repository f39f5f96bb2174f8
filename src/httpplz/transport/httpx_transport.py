"""Transport capability backed by ``httpx.AsyncClient``."""

import io
import logging
from typing import Any, Protocol

import httpx

from httpplz.middleware import TransportOptions
from httpplz.utils.body import FormData

logger = logging.getLogger(__name__)

# Pass-through option keys and where httpx takes them
REQUEST_OPTION_KEYS = ("cookies", "timeout", "extensions")
SEND_OPTION_KEYS = ("auth", "follow_redirects")


class Transport(Protocol):
    """Sends one request and returns the response.

    Implementations receive the absolute request URL and the final transport
    options (``method``, ``headers``, optional ``body`` and pass-through keys).
    Network failures are raised as-is.
    """

    async def __call__(self, url: httpx.URL, options: TransportOptions) -> httpx.Response: ...


def _multipart_files(form: FormData) -> list[tuple[str, Any]]:
    # Plain fields go in as file parts without a filename so httpx always
    # produces multipart/form-data, even when no uploads are attached.
    parts: list[tuple[str, Any]] = []
    for name, value in form.fields.items():
        values = value if isinstance(value, list) else [value]
        for item in values:
            parts.append((name, (None, item if isinstance(item, (str, bytes)) else str(item))))
    for name, value in form.files.items():
        parts.append((name, value))
    return parts


def body_kwargs(body: Any) -> dict[str, Any]:
    """Translate a coerced request body into ``httpx`` request arguments."""
    if body is None:
        return {}
    if isinstance(body, FormData):
        files = _multipart_files(body)
        return {"files": files} if files else {}
    if isinstance(body, httpx.QueryParams):
        return {"content": str(body)}
    if isinstance(body, io.IOBase):
        return {"content": body.read()}
    if isinstance(body, (bytearray, memoryview)):
        return {"content": bytes(body)}
    return {"content": body}


class HttpxTransport:
    """Send requests through an ``httpx.AsyncClient``.

    The transport owns the client it creates and closes it in ``aclose()``;
    an injected client is left for its owner to close.

    Args:
        client: Existing async client to send requests with
        transport: Low-level httpx transport for a newly created client,
            e.g. ``httpx.MockTransport`` in tests
        **client_kwargs: Extra arguments for a newly created client

    Example:
        ```python
        transport = HttpxTransport(transport=httpx.MockTransport(handler))
        client = create_client(base_url="https://api.example.com", transport=transport)
        ```
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **client_kwargs: Any,
    ) -> None:
        if client is not None and (transport is not None or client_kwargs):
            raise ValueError("Pass either an existing client or arguments for a new one, not both")

        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(transport=transport, **client_kwargs)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __call__(self, url: httpx.URL, options: TransportOptions) -> httpx.Response:
        remaining = dict(options)
        method = remaining.pop("method", "GET")
        headers = remaining.pop("headers", None)
        body = remaining.pop("body", None)

        request_kwargs = {key: remaining.pop(key) for key in REQUEST_OPTION_KEYS if key in remaining}
        send_kwargs = {key: remaining.pop(key) for key in SEND_OPTION_KEYS if key in remaining}
        if remaining:
            logger.debug(f"Ignoring transport options httpx does not accept: {sorted(remaining)}")

        request = self._client.build_request(method, url, headers=headers, **body_kwargs(body), **request_kwargs)
        logger.debug(f"Sending {request.method} {request.url}")
        return await self._client.send(request, **send_kwargs)
