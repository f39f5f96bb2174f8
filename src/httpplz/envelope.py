"""Response wrapper carrying the transport response and its decoded payload."""

from collections.abc import AsyncIterator
from typing import Any, Generic, TypeVar

import httpx

T = TypeVar("T")

_MISSING: Any = object()


class ResponseEnvelope(Generic[T]):
    """Transport response plus the decoded ``data`` payload.

    Status line, headers and other metadata come from the response as left by
    response middleware. Body accessors read from the pristine transport
    response, which neither middleware nor decoding has consumed.

    Example:
        ```python
        response = await client.get("/users", resolver="json")
        if response.ok:
            users = response.data
        raw_bytes = await response.aread()
        ```
    """

    def __init__(
        self,
        raw: httpx.Response,
        processed: httpx.Response | None = None,
        data: T = _MISSING,
        *,
        url: httpx.URL | None = None,
    ):
        self._raw = raw
        self._processed = processed if processed is not None else raw
        self._data = data
        self._url = url

    def __repr__(self) -> str:
        return f"<ResponseEnvelope [{self.status} {self.status_text}]>"

    @property
    def raw(self) -> httpx.Response:
        """The transport response exactly as returned by the transport."""
        return self._raw

    @property
    def processed(self) -> httpx.Response:
        """The response after response middleware ran."""
        return self._processed

    @property
    def has_data(self) -> bool:
        return self._data is not _MISSING

    @property
    def data(self) -> T | None:
        """Decoded payload, or None when no resolver was configured."""
        return None if self._data is _MISSING else self._data

    # Metadata

    @property
    def status(self) -> int:
        return self._processed.status_code

    @property
    def status_text(self) -> str:
        return self._processed.reason_phrase

    @property
    def ok(self) -> bool:
        return self._processed.is_success

    @property
    def headers(self) -> httpx.Headers:
        return self._processed.headers

    @property
    def url(self) -> httpx.URL | None:
        """URL the request was sent to, or None when nothing records it."""
        request = self.request
        return request.url if request is not None else self._url

    @property
    def request(self) -> httpx.Request | None:
        # Middleware and plain transports may build responses without a request
        for response in (self._processed, self._raw):
            try:
                return response.request
            except RuntimeError:
                continue
        return None

    @property
    def http_version(self) -> str:
        return self._processed.http_version

    @property
    def extensions(self) -> dict[str, Any]:
        return self._processed.extensions

    # Body, always from the untouched transport response

    @property
    def content(self) -> bytes:
        return self._raw.content

    @property
    def text(self) -> str:
        return self._raw.text

    def json(self, **kwargs: Any) -> Any:
        return self._raw.json(**kwargs)

    async def aread(self) -> bytes:
        return await self._raw.aread()

    def aiter_bytes(self, chunk_size: int | None = None) -> AsyncIterator[bytes]:
        return self._raw.aiter_bytes(chunk_size)
