"""Error taxonomy and HTTP failure classification."""

from httpplz.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    HttpError,
    HttpPlzError,
    InvalidInputError,
    InvalidURLError,
    NotFoundError,
    RateLimitError,
    ResolverError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from httpplz.errors.handler import raise_for_status, read_error_body
from httpplz.errors.models import ProblemDetail

__all__ = [
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ForbiddenError",
    "HttpError",
    "HttpPlzError",
    "InvalidInputError",
    "InvalidURLError",
    "NotFoundError",
    "ProblemDetail",
    "RateLimitError",
    "ResolverError",
    "ServerError",
    "UnauthorizedError",
    "ValidationError",
    "raise_for_status",
    "read_error_body",
]
