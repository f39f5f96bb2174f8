"""Independent readable copies of transport responses."""

import httpx

# Describe the encoded payload; a copy holds decoded bytes so these no longer apply.
_ENCODING_HEADERS = ("content-encoding", "content-length", "transfer-encoding")


async def clone_response(response: httpx.Response) -> httpx.Response:
    """Return a new response over the same body as ``response``.

    The source body is buffered once with ``aread()``. httpx keeps buffered
    content available, so the source stays fully readable for the caller and
    every copy can be consumed on its own.

    Args:
        response: Response to copy

    Returns:
        A fresh ``httpx.Response`` with the same status, headers, request and body
    """
    content = await response.aread()

    headers = httpx.Headers(response.headers)
    for name in _ENCODING_HEADERS:
        if name in headers:
            del headers[name]

    try:
        request = response.request
    except RuntimeError:
        # Responses built by hand in tests carry no request
        request = None

    return httpx.Response(
        status_code=response.status_code,
        headers=headers,
        content=content,
        request=request,
        extensions=dict(response.extensions),
    )
