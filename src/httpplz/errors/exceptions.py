"""Structured exceptions for httpplz."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

    from httpplz.errors.models import ProblemDetail


class HttpPlzError(Exception):
    """Base exception for every error raised by httpplz itself."""

    pass


class InvalidURLError(HttpPlzError, ValueError):
    """Base URL is not a valid absolute URL."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class InvalidInputError(HttpPlzError, ValueError):
    """A required argument is missing or has an unsupported value."""

    pass


class ResolverError(HttpPlzError):
    """The response body cannot be decoded with the requested resolver."""

    pass


class HttpError(HttpPlzError):
    """Response received but its status indicates failure.

    Attributes:
        status_code: HTTP status of the response.
        response: The transport response, body still readable.
        request_options: Transport options the request was sent with.
        body: Parsed JSON error payload, or the raw text when it is not JSON.
        problem_detail: RFC 7807 details when the body carries them.
    """

    def __init__(
        self,
        message: str,
        *,
        response: "httpx.Response",
        request_options: dict[str, Any] | None = None,
        body: Any = None,
        problem_detail: "ProblemDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = response.status_code
        self.response = response
        self.request_options = request_options if request_options is not None else {}
        self.body = body
        self.problem_detail = problem_detail


class ClientError(HttpError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity (validation errors)."""

    def __init__(self, message: str, validation_errors: list[dict] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else []


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(HttpError):
    """5xx server errors."""

    pass
