"""Error classification for non-success HTTP responses."""

import logging
from typing import Any

import httpx

from httpplz.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    HttpError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from httpplz.errors.models import ProblemDetail
from httpplz.utils.response import clone_response

logger = logging.getLogger(__name__)

EXCEPTION_MAP: dict[int, type[HttpError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def exception_class_for(status_code: int) -> type[HttpError]:
    """Map a failing status code to its exception class."""
    if status_code in EXCEPTION_MAP:
        return EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return HttpError


async def read_error_body(response: httpx.Response) -> Any:
    """Best-effort parse of an error body from an independent copy.

    Returns the decoded JSON value, or the raw text when the body is not JSON.
    """
    copy = await clone_response(response)
    try:
        return copy.json()
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        return copy.text


def _parse_retry_after(response: httpx.Response) -> int | None:
    if "retry-after" not in response.headers:
        return None
    try:
        return int(response.headers["retry-after"])
    except (ValueError, TypeError):
        return None


async def raise_for_status(response: httpx.Response, request_options: dict[str, Any] | None = None) -> None:
    """Raise the matching ``HttpError`` for a non-success response.

    The error body is read from a copy, so ``response`` handed to the
    exception is still readable.

    Args:
        response: HTTP response object
        request_options: Transport options the request was sent with

    Raises:
        HttpError subclass based on status code
    """
    if response.is_success:
        return

    body = await read_error_body(response)
    problem_detail = ProblemDetail.from_body(body)
    status_code = response.status_code
    exc_class = exception_class_for(status_code)

    message = f"HTTP Error: {status_code} {response.reason_phrase}".rstrip()
    if problem_detail:
        detail_message = problem_detail.to_exception_message()
        if detail_message:
            message = f"{message}\n{detail_message}"

    method = (request_options or {}).get("method", "REQUEST")
    logger.warning(f"{method} request failed: {message}")

    kwargs: dict[str, Any] = {
        "response": response,
        "request_options": request_options,
        "body": body,
        "problem_detail": problem_detail,
    }

    if exc_class is RateLimitError:
        raise RateLimitError(message, retry_after=_parse_retry_after(response), **kwargs)

    if exc_class is ValidationError:
        validation_errors = None
        if problem_detail and problem_detail.extensions:
            if "errors" in problem_detail.extensions:
                validation_errors = problem_detail.extensions.get("errors")
            else:
                validation_errors = problem_detail.extensions.get("validation_errors")
        elif isinstance(body, dict) and isinstance(body.get("errors"), list):
            validation_errors = body["errors"]
        raise ValidationError(message, validation_errors=validation_errors, **kwargs)

    raise exc_class(message, **kwargs)
