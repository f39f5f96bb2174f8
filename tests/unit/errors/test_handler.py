"""Tests for HTTP failure classification."""

import httpx
import pytest

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
from httpplz.errors.handler import exception_class_for, raise_for_status, read_error_body


@pytest.mark.unit
async def test_raise_for_status_success_response():
    """Test raise_for_status doesn't raise for successful responses."""
    await raise_for_status(httpx.Response(status_code=200))


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status_code", "exc_class"),
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
        (422, ValidationError),
        (429, RateLimitError),
        (418, ClientError),
        (500, ServerError),
        (503, ServerError),
        (302, HttpError),
    ],
)
def test_exception_class_for(status_code, exc_class):
    """Test status codes map to the expected exception classes."""
    assert exception_class_for(status_code) is exc_class


@pytest.mark.unit
async def test_raise_for_status_json_body():
    """Test a JSON error body is parsed onto the exception."""
    response = httpx.Response(status_code=404, json={"error": "User not found"})

    with pytest.raises(NotFoundError) as exc_info:
        await raise_for_status(response, {"method": "GET", "headers": {}})

    error = exc_info.value
    assert error.status_code == 404
    assert error.body == {"error": "User not found"}
    assert error.request_options == {"method": "GET", "headers": {}}
    assert error.response is response
    assert str(error) == "HTTP Error: 404 Not Found"


@pytest.mark.unit
async def test_raise_for_status_text_body():
    """Test a non-JSON error body falls back to text."""
    response = httpx.Response(status_code=400, headers={"content-type": "text/plain"}, text="Bad request")

    with pytest.raises(BadRequestError) as exc_info:
        await raise_for_status(response)

    assert exc_info.value.body == "Bad request"
    assert exc_info.value.problem_detail is None


@pytest.mark.unit
async def test_response_body_still_readable_after_classification():
    """Test the response body stays readable after classification."""
    response = httpx.Response(status_code=500, text="boom")

    with pytest.raises(ServerError):
        await raise_for_status(response)

    assert response.text == "boom"


@pytest.mark.unit
async def test_problem_detail_in_message():
    """Test RFC 7807 details appear in the exception message."""
    response = httpx.Response(
        status_code=403,
        headers={"content-type": "application/problem+json"},
        json={"title": "Forbidden", "detail": "Token lacks scope"},
    )

    with pytest.raises(ForbiddenError) as exc_info:
        await raise_for_status(response)

    error = exc_info.value
    assert error.problem_detail is not None
    assert error.problem_detail.detail == "Token lacks scope"
    assert "Token lacks scope" in str(error)


@pytest.mark.unit
async def test_rate_limit_retry_after():
    """Test raise_for_status parses Retry-After for 429."""
    response = httpx.Response(status_code=429, headers={"retry-after": "60"}, text="Too many requests")

    with pytest.raises(RateLimitError) as exc_info:
        await raise_for_status(response)

    assert exc_info.value.retry_after == 60


@pytest.mark.unit
async def test_rate_limit_invalid_retry_after():
    """Test an unparseable Retry-After header yields None."""
    response = httpx.Response(status_code=429, headers={"retry-after": "tomorrow"})

    with pytest.raises(RateLimitError) as exc_info:
        await raise_for_status(response)

    assert exc_info.value.retry_after is None


@pytest.mark.unit
async def test_validation_errors_from_problem_extensions():
    """Test validation errors are taken from problem extensions."""
    response = httpx.Response(
        status_code=422,
        json={"title": "Validation Failed", "errors": [{"field": "email"}]},
    )

    with pytest.raises(ValidationError) as exc_info:
        await raise_for_status(response)

    assert exc_info.value.validation_errors == [{"field": "email"}]


@pytest.mark.unit
async def test_validation_errors_from_plain_body():
    """Test validation errors are taken from a plain errors list."""
    response = httpx.Response(status_code=422, json={"errors": [{"field": "name"}]})

    with pytest.raises(ValidationError) as exc_info:
        await raise_for_status(response)

    assert exc_info.value.validation_errors == [{"field": "name"}]


@pytest.mark.unit
async def test_read_error_body_handles_non_utf8():
    """Test undecodable error bodies fall back to text."""
    response = httpx.Response(status_code=500, content=b"\xff\xfe plain")

    body = await read_error_body(response)

    assert isinstance(body, str)
