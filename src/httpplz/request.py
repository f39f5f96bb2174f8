"""Request execution: build, run middleware, send, classify, decode, wrap."""

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

import httpx

from httpplz.config import ClientConfig
from httpplz.envelope import ResponseEnvelope
from httpplz.errors.exceptions import InvalidInputError
from httpplz.errors.handler import raise_for_status
from httpplz.middleware import TransportOptions, run_request_middleware, run_response_middleware
from httpplz.resolvers import ResolverKind, decode_response, resolve_kind
from httpplz.transport import Transport
from httpplz.utils.body import coerce_body
from httpplz.utils.response import clone_response
from httpplz.utils.url import apply_query, build_path

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

_RESERVED_OPTIONS = ("method", "body")


@dataclass
class RequestOptions:
    """Per-call request description.

    Attributes:
        path: Path replacing the base URL's path.
        query: Query parameters set on the URL.
        options: Transport options for this call only (no ``method``/``body``).
        resolver: Decoder override for this call.
        body: Request body, classified by ``coerce_body``.
    """

    path: str = ""
    query: Mapping[str, str] = field(default_factory=dict)
    options: Mapping[str, Any] = field(default_factory=dict)
    resolver: ResolverKind | str | None = None
    body: Any = None


def _has_header(headers: Mapping[str, Any], name: str) -> bool:
    name = name.lower()
    return any(key.lower() == name for key in headers)


def build_transport_options(config: ClientConfig, method: str, request: RequestOptions) -> TransportOptions:
    """Layer client defaults, per-call options and the method into a fresh dict.

    Headers merge per key with per-call headers winning. A Content-Type hint
    from the body sits beneath any explicit Content-Type header.

    Raises:
        InvalidInputError: If per-call options try to set ``method`` or ``body``
    """
    reserved = [key for key in _RESERVED_OPTIONS if key in request.options]
    if reserved:
        raise InvalidInputError(f"Per-call options must not set {', '.join(reserved)}")

    headers = {**(config.default_options.get("headers") or {}), **(request.options.get("headers") or {})}
    transport_options: TransportOptions = {
        **copy.deepcopy(config.default_options),
        **request.options,
        "method": method,
        "headers": headers,
    }

    if request.body is not None:
        coerced = coerce_body(request.body)
        transport_options["body"] = coerced.processed_body
        if coerced.content_type and not _has_header(headers, "content-type"):
            transport_options["headers"] = {"Content-Type": coerced.content_type, **headers}

    return transport_options


async def execute_request(
    config: ClientConfig,
    transport: Transport,
    method: HttpMethod,
    request: RequestOptions,
) -> ResponseEnvelope[Any]:
    """Run one request through the full pipeline.

    Steps: build URL and transport options, run request middleware, send via
    ``transport``, raise ``HttpError`` for non-success statuses, run response
    middleware on a copy of the response, decode the post-middleware copy,
    and wrap everything in a ``ResponseEnvelope``.

    Errors from middleware, the transport and decoders propagate unchanged.

    Args:
        config: Client configuration
        transport: Capability that sends the request
        method: HTTP method
        request: Per-call request description

    Returns:
        Envelope exposing the untouched transport response plus ``data``
    """
    url = build_path(config.base_url, request.path)
    if request.query:
        url = apply_query(url, request.query)

    options = build_transport_options(config, method, request)
    resolver = resolve_kind(request.resolver) if request.resolver is not None else config.resolver

    options = await run_request_middleware(options, config.request_middleware)

    logger.debug(f"{method} {url}")
    response = await transport(url, options)
    try:
        response.request
    except RuntimeError:
        # Plain transport callables may return a response with no request attached
        response.request = httpx.Request(method, url, headers=options.get("headers"))

    await raise_for_status(response, options)

    processed = await run_response_middleware(await clone_response(response), config.response_middleware)

    if resolver is None:
        return ResponseEnvelope(response, processed, url=url)

    data = await decode_response(processed, resolver)
    return ResponseEnvelope(response, processed, data, url=url)
