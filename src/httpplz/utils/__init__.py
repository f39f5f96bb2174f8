"""Request building helpers: URL construction, body coercion and response copies."""

from httpplz.utils.body import CoercedBody, FormData, coerce_body
from httpplz.utils.response import clone_response
from httpplz.utils.url import apply_query, build_path

__all__ = [
    "CoercedBody",
    "FormData",
    "apply_query",
    "build_path",
    "clone_response",
    "coerce_body",
]
