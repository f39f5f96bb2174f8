"""httpplz - structured async HTTP client built on httpx.

Provides:
- Declarative requests: base URL + path + query + body
- Request middleware (registration order) and response middleware (reverse order)
- ``HttpError`` classification for non-success responses with parsed error bodies
- ``ResponseEnvelope`` carrying the untouched transport response and decoded ``data``

Example:
    ```python
    from httpplz import create_client

    client = create_client(base_url="https://api.example.com", resolver="json")
    response = await client.get("/users", query={"page": "1"})
    print(response.status, response.data)
    ```
"""

from httpplz.client import HttpClient, create_client
from httpplz.config import ClientConfig, merge_config
from httpplz.envelope import ResponseEnvelope
from httpplz.errors import HttpError, HttpPlzError
from httpplz.request import RequestOptions
from httpplz.resolvers import ResolverKind
from httpplz.utils.body import FormData

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "FormData",
    "HttpClient",
    "HttpError",
    "HttpPlzError",
    "RequestOptions",
    "ResolverKind",
    "ResponseEnvelope",
    "__version__",
    "create_client",
    "merge_config",
]
