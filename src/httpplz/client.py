"""HTTP client bound to a configuration and a transport."""

import logging
from collections.abc import Mapping
from typing import Any

from httpplz.config import ClientConfig, merge_config
from httpplz.envelope import ResponseEnvelope
from httpplz.request import HttpMethod, RequestOptions, execute_request
from httpplz.resolvers import ResolverKind
from httpplz.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)


class HttpClient:
    """Per-verb call sites bound to one ``ClientConfig``.

    Clients are immutable: ``clone`` returns a new client and leaves this one
    untouched. Every call builds its own URL and transport options, so one
    client can serve concurrent requests.

    Example:
        ```python
        client = create_client(base_url="https://api.example.com", resolver="json")

        users = await client.get("/users", query={"page": "1"})
        created = await client.post("/users", body={"name": "Ada"})

        admin = client.clone({"default_options": {"headers": {"X-Admin": "1"}}})
        ```
    """

    def __init__(self, config: ClientConfig, transport: Transport | None = None) -> None:
        self._config = config
        self._transport = transport if transport is not None else HttpxTransport()

    def __repr__(self) -> str:
        return f"<HttpClient base_url={self._config.base_url!r}>"

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if it holds resources."""
        aclose = getattr(self._transport, "aclose", None)
        if aclose is not None:
            await aclose()

    async def request(
        self,
        method: HttpMethod,
        path: str = "",
        *,
        query: Mapping[str, str] | None = None,
        options: Mapping[str, Any] | None = None,
        resolver: ResolverKind | str | None = None,
        body: Any = None,
    ) -> ResponseEnvelope[Any]:
        """Send a request with an explicit method.

        Args:
            method: HTTP method
            path: Path replacing the base URL's path
            query: Query parameters
            options: Transport options for this call only
            resolver: Decoder override for this call
            body: Request body

        Raises:
            HttpError: Response status is not a success
        """
        request = RequestOptions(
            path=path,
            query=dict(query or {}),
            options=dict(options or {}),
            resolver=resolver,
            body=body,
        )
        return await execute_request(self._config, self._transport, method, request)

    async def get(self, path: str = "", **kwargs: Any) -> ResponseEnvelope[Any]:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str = "", **kwargs: Any) -> ResponseEnvelope[Any]:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str = "", **kwargs: Any) -> ResponseEnvelope[Any]:
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str = "", **kwargs: Any) -> ResponseEnvelope[Any]:
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str = "", **kwargs: Any) -> ResponseEnvelope[Any]:
        return await self.request("DELETE", path, **kwargs)

    def clone(self, overrides: Mapping[str, Any] | None = None, /, **kwargs: Any) -> "HttpClient":
        """Return a new client whose configuration is this one with overrides laid on top.

        Overrides may be a mapping, keywords or both (keywords win). The new
        client shares this client's transport.
        """
        merged = merge_config(self._config, {**(overrides or {}), **kwargs})
        logger.debug(f"Cloned client for {merged.base_url}")
        return HttpClient(merged, self._transport)


def create_client(
    config: ClientConfig | None = None,
    /,
    *,
    transport: Transport | None = None,
    **config_fields: Any,
) -> HttpClient:
    """Create a client from a ``ClientConfig`` or its fields as keywords.

    Args:
        config: Complete configuration; mutually exclusive with ``config_fields``
        transport: Capability that sends requests; defaults to a new ``HttpxTransport``
        **config_fields: ``ClientConfig`` fields (``base_url``, ``default_options``,
            ``resolver``, ``request_middleware``, ``response_middleware``)

    Example:
        ```python
        client = create_client(base_url="https://api.example.com")
        client = create_client(ClientConfig.from_env(), transport=my_transport)
        ```
    """
    if config is not None and config_fields:
        raise TypeError("create_client() takes either a ClientConfig or config fields, not both")
    if config is None:
        config = ClientConfig(**config_fields)
    return HttpClient(config, transport)
