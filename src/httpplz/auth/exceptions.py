"""Exceptions for environment-driven configuration and credentials."""

from httpplz.errors.exceptions import HttpPlzError


class CredentialError(HttpPlzError):
    """Base exception for configuration values that cannot be resolved."""

    pass


class CredentialNotFoundError(CredentialError):
    """A required value was not found in any source.

    Attributes:
        env_var_name: The environment variable that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """A value file could not be read."""

    pass
