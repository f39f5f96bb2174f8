"""Tests for RFC 7807 Problem Details models."""

import pytest

from httpplz.errors.models import ProblemDetail


@pytest.mark.unit
def test_parse_rfc7807_body():
    """Test parsing an RFC 7807 formatted body."""
    problem = ProblemDetail.from_body(
        {
            "type": "https://api.example.com/problems/validation-error",
            "title": "Request validation failed",
            "status": 400,
            "detail": "The request body contains invalid data",
            "instance": "/users/123",
        }
    )

    assert problem is not None
    assert problem.type == "https://api.example.com/problems/validation-error"
    assert problem.title == "Request validation failed"
    assert problem.status == 400
    assert problem.detail == "The request body contains invalid data"
    assert problem.instance == "/users/123"
    assert problem.extensions is None


@pytest.mark.unit
def test_parse_rfc7807_with_extensions():
    """Test extension members are collected separately."""
    problem = ProblemDetail.from_body(
        {
            "title": "Validation Failed",
            "status": 422,
            "errors": [{"field": "email", "message": "Invalid email format"}],
            "request_id": "abc-123",
        }
    )

    assert problem is not None
    assert problem.extensions == {
        "errors": [{"field": "email", "message": "Invalid email format"}],
        "request_id": "abc-123",
    }


@pytest.mark.unit
@pytest.mark.parametrize("body", [{"error": "nope"}, "Not found", ["a"], None])
def test_non_problem_bodies(body):
    """Test bodies without standard members are not problem details."""
    assert ProblemDetail.from_body(body) is None


@pytest.mark.unit
def test_to_exception_message():
    """Test message rendering includes every populated member."""
    problem = ProblemDetail(
        type="https://api.example.com/problems/x",
        title="Broken",
        detail="Something broke",
        instance="/x/1",
        extensions={"trace": "t-1"},
    )

    assert problem.to_exception_message() == (
        "Broken\n"
        "Something broke\n"
        "Problem Type: https://api.example.com/problems/x\n"
        "Instance: /x/1\n"
        "Extension fields:\n"
        "  - trace: t-1"
    )


@pytest.mark.unit
def test_to_exception_message_detail_only():
    """Test detail is used when there is no title."""
    assert ProblemDetail(detail="Only detail").to_exception_message() == "Only detail"


@pytest.mark.unit
def test_to_exception_message_empty():
    """Test an empty problem renders an empty message."""
    assert ProblemDetail().to_exception_message() == ""
