"""Testing utilities for code built on httpplz.

``RecordingTransport`` stands in for the network: it records every call and
answers with scripted responses or a handler function.

Example:
    ```python
    from httpplz import create_client
    from httpplz.testing import RecordingTransport, create_error_response, create_mock_response

    transport = RecordingTransport([create_mock_response({"success": True})])
    client = create_client(base_url="https://api.example.com", resolver="json", transport=transport)

    response = await client.get("/users")
    assert response.data == {"success": True}
    assert transport.calls[0].options["method"] == "GET"
    ```
"""

from httpplz.testing.factories import create_error_response, create_mock_response
from httpplz.testing.transport import RecordedCall, RecordingTransport

__all__ = [
    "RecordedCall",
    "RecordingTransport",
    "create_error_response",
    "create_mock_response",
]
