"""Request middleware that attaches authentication and fixed headers."""

from collections.abc import Mapping

from httpplz.middleware import RequestMiddleware, TransportOptions


def static_headers(headers: Mapping[str, str]) -> RequestMiddleware:
    """Middleware adding ``headers`` to every request, replacing same-named ones."""
    fixed = dict(headers)

    def add_static_headers(options: TransportOptions) -> TransportOptions:
        return {**options, "headers": {**(options.get("headers") or {}), **fixed}}

    return add_static_headers


def bearer_token(token: str) -> RequestMiddleware:
    """Middleware sending ``Authorization: Bearer <token>``.

    Example:
        ```python
        client = create_client(base_url=url, request_middleware=[bearer_token(api_key)])
        ```
    """
    if not token:
        raise ValueError("bearer_token() requires a non-empty token")

    add_bearer_token = static_headers({"Authorization": f"Bearer {token}"})
    add_bearer_token.__qualname__ = "bearer_token"
    return add_bearer_token
