"""Authentication middleware and environment-based credential resolution.

Example:
    ```python
    from httpplz.auth import CredentialResolver, bearer_token

    resolver = CredentialResolver()
    api_key = resolver.resolve(env_var_name="API_KEY", required=True)
    client = create_client(base_url=url, request_middleware=[bearer_token(api_key)])
    ```
"""

from httpplz.auth.credentials import CredentialResolver
from httpplz.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from httpplz.auth.middleware import bearer_token, static_headers

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "bearer_token",
    "static_headers",
]
