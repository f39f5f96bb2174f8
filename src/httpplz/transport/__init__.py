"""Transport capability: the component that actually sends requests.

The request executor never reaches for a global HTTP client. It calls whatever
``Transport`` the client was built with; ``HttpxTransport`` is the default and
any async callable with the same signature can stand in for it.

Example:
    ```python
    from httpplz.transport import HttpxTransport

    async with HttpxTransport(timeout=10.0) as transport:
        client = create_client(base_url="https://api.example.com", transport=transport)
        response = await client.get("/health")
    ```
"""

from httpplz.transport.httpx_transport import HttpxTransport, Transport, body_kwargs

__all__ = ["HttpxTransport", "Transport", "body_kwargs"]
