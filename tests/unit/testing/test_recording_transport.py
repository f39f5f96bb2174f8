"""Tests for the in-memory testing helpers."""

import httpx
import pytest

from httpplz.testing import RecordingTransport, create_error_response, create_mock_response

URL = httpx.URL("https://api.example.com/users")


@pytest.mark.unit
async def test_replays_responses_in_order():
    """Test scripted responses are returned in order."""
    transport = RecordingTransport([create_mock_response({"n": 1}), create_mock_response({"n": 2})])

    first = await transport(URL, {"method": "GET"})
    second = await transport(URL, {"method": "GET"})

    assert first.json() == {"n": 1}
    assert second.json() == {"n": 2}
    assert transport.call_count == 2


@pytest.mark.unit
async def test_records_snapshot_of_options():
    """Test recorded options are a snapshot of the call."""
    transport = RecordingTransport([create_mock_response()])
    options = {"method": "POST", "headers": {"X-A": "1"}}

    await transport(URL, options)
    options["headers"]["X-A"] = "changed"

    assert transport.calls[0].url == URL
    assert transport.calls[0].options == {"method": "POST", "headers": {"X-A": "1"}}


@pytest.mark.unit
async def test_attaches_request_to_response():
    """Test responses get a request attached."""
    transport = RecordingTransport([create_mock_response()])

    response = await transport(URL, {"method": "DELETE"})

    assert response.request.method == "DELETE"
    assert response.url == URL


@pytest.mark.unit
async def test_async_handler():
    """Test an async handler answers calls."""
    async def handler(url, options):
        return create_mock_response(text=options["method"])

    transport = RecordingTransport(handler=handler)

    response = await transport(URL, {"method": "PATCH"})

    assert response.text == "PATCH"


@pytest.mark.unit
async def test_raises_scripted_exception():
    """Test scripted exceptions are raised."""
    transport = RecordingTransport([httpx.ReadTimeout("timed out")])

    with pytest.raises(httpx.ReadTimeout):
        await transport(URL, {"method": "GET"})

    assert transport.call_count == 1


@pytest.mark.unit
async def test_runs_out_of_responses():
    """Test running out of responses fails loudly."""
    transport = RecordingTransport()

    with pytest.raises(AssertionError, match="no response left"):
        await transport(URL, {"method": "GET"})


@pytest.mark.unit
def test_create_mock_response_body_kinds():
    """Test create_mock_response builds JSON, text, raw and empty bodies."""
    assert create_mock_response({"a": 1}).json() == {"a": 1}
    assert create_mock_response(text="hi").text == "hi"
    assert create_mock_response(content=b"\x00").content == b"\x00"
    assert create_mock_response(status_code=204).content == b""


@pytest.mark.unit
def test_create_error_response():
    """Test create_error_response builds text and JSON error bodies."""
    assert create_error_response(404, {"error": "missing"}).json() == {"error": "missing"}
    assert create_error_response(500, "boom").text == "boom"
    assert create_error_response(503).status_code == 503
