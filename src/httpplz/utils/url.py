"""URL construction: base URL + path, then query parameters."""

import logging
from collections.abc import Mapping

import httpx

from httpplz.errors.exceptions import InvalidInputError, InvalidURLError

logger = logging.getLogger(__name__)


def parse_base_url(base_url: str) -> httpx.URL:
    """Parse ``base_url`` and require it to be absolute (scheme and host).

    Raises:
        InvalidURLError: If the string is not a valid absolute URL
    """
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidURLError(f"Invalid base URL {base_url!r}: {e}", url=base_url) from e

    if not url.is_absolute_url or not url.host:
        raise InvalidURLError(f"Base URL must be absolute: {base_url!r}", url=base_url)

    return url


def build_path(base_url: str, path: str) -> httpx.URL:
    """Combine a base URL and a path into an absolute URL.

    The path replaces whatever path the base URL carries; it is never appended.
    Scheme, authority and any query on the base URL are kept.

    Args:
        base_url: Absolute base URL, e.g. ``"https://api.example.com"``
        path: Path for this request, e.g. ``"/users"``

    Returns:
        The request URL

    Raises:
        InvalidURLError: If ``base_url`` is not a valid absolute URL
    """
    url = parse_base_url(base_url)

    if not path:
        path = "/"
    elif not path.startswith("/"):
        path = f"/{path}"

    return url.copy_with(path=path)


def apply_query(url: httpx.URL | str | None, query: Mapping[str, str]) -> httpx.URL:
    """Return a new URL with every ``query`` key set; the input is left untouched.

    Existing parameters with the same key are replaced (last write wins).

    Raises:
        InvalidInputError: If ``url`` is missing
    """
    if url is None:
        raise InvalidInputError("apply_query() requires a URL")

    new_url = httpx.URL(url)
    for key, value in query.items():
        new_url = new_url.copy_set_param(key, value)

    logger.debug(f"Applied {len(query)} query parameter(s): {new_url}")
    return new_url
