"""Client configuration and configuration overlay."""

import copy
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from typing import Any

from httpplz.auth.credentials import CredentialResolver
from httpplz.auth.middleware import bearer_token
from httpplz.errors.exceptions import InvalidInputError
from httpplz.middleware import RequestMiddleware, ResponseMiddleware
from httpplz.resolvers import ResolverKind, resolve_kind
from httpplz.utils.url import parse_base_url

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "HTTPPLZ_"


def _copy_options(options: Mapping[str, Any] | None) -> dict[str, Any]:
    # Nested values (headers, cookies, extensions) must not stay shared with the caller
    return copy.deepcopy(dict(options or {}))


@dataclass(frozen=True)
class ClientConfig:
    """Settings a client is bound to.

    Attributes:
        base_url: Absolute URL every request path is resolved against.
        default_options: Transport options applied to every request
            (``headers``, ``timeout``, ``cookies`` and other pass-through keys).
        resolver: Default decoder for successful responses, or None to skip decoding.
        request_middleware: Request transforms, run in this order.
        response_middleware: Response transforms, run in reverse order.
    """

    base_url: str
    default_options: dict[str, Any] = field(default_factory=dict)
    resolver: ResolverKind | None = None
    request_middleware: tuple[RequestMiddleware, ...] = ()
    response_middleware: tuple[ResponseMiddleware, ...] = ()

    def __post_init__(self) -> None:
        parse_base_url(self.base_url)
        options = _copy_options(self.default_options)
        if "method" in options or "body" in options:
            raise InvalidInputError("default_options must not set 'method' or 'body'")
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "default_options", options)
        object.__setattr__(self, "resolver", resolve_kind(self.resolver))
        object.__setattr__(self, "request_middleware", tuple(self.request_middleware))
        object.__setattr__(self, "response_middleware", tuple(self.response_middleware))

    @classmethod
    def from_env(
        cls,
        *,
        prefix: str = DEFAULT_ENV_PREFIX,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
        **overrides: Any,
    ) -> "ClientConfig":
        """Build a configuration from environment variables (and a .env file).

        Reads ``<prefix>BASE_URL`` (required), ``<prefix>TOKEN`` (bearer token),
        ``<prefix>RESOLVER`` and ``<prefix>TIMEOUT`` (seconds). Keyword
        ``overrides`` are overlaid on the result with ``merge_config``.

        Raises:
            CredentialNotFoundError: If the base URL is not set anywhere
            InvalidInputError: If the timeout is not a number
        """
        resolver = CredentialResolver(dotenv_path=dotenv_path, load_dotenv=load_dotenv)

        base_url = resolver.resolve(env_var_name=f"{prefix}BASE_URL", required=True, mask_in_logs=False)
        token = resolver.resolve(env_var_name=f"{prefix}TOKEN")
        resolver_kind = resolver.resolve(env_var_name=f"{prefix}RESOLVER", mask_in_logs=False)
        timeout = resolver.resolve(env_var_name=f"{prefix}TIMEOUT", mask_in_logs=False)

        default_options: dict[str, Any] = {}
        if timeout is not None:
            try:
                default_options["timeout"] = float(timeout)
            except ValueError:
                raise InvalidInputError(f"{prefix}TIMEOUT must be a number of seconds, got {timeout!r}") from None

        config = cls(
            base_url=base_url,
            default_options=default_options,
            resolver=resolver_kind,
            request_middleware=(bearer_token(token),) if token else (),
        )
        return merge_config(config, overrides) if overrides else config


_CONFIG_FIELDS = frozenset(f.name for f in fields(ClientConfig))


def merge_config(base: ClientConfig, overrides: Mapping[str, Any] | None = None) -> ClientConfig:
    """Return a new configuration with ``overrides`` laid over ``base``.

    - ``base_url`` and ``resolver`` replace the base value when present.
    - ``default_options`` headers merge per key (override wins); every other
      option key in the override replaces the base value.
    - ``request_middleware`` / ``response_middleware`` replace the base
      sequence wholesale when present; nothing is concatenated.

    Neither ``base`` nor ``overrides`` is modified, and the result shares no
    mutable state with ``overrides``.

    Raises:
        InvalidInputError: If ``overrides`` names an unknown field
        InvalidURLError: If the resulting base URL is invalid
    """
    overrides = dict(overrides or {})
    unknown = set(overrides) - _CONFIG_FIELDS
    if unknown:
        raise InvalidInputError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")

    options = dict(base.default_options)
    override_options = _copy_options(overrides.get("default_options"))
    for key, value in override_options.items():
        if key == "headers":
            options["headers"] = {**(options.get("headers") or {}), **(value or {})}
        else:
            options[key] = value

    merged = ClientConfig(
        base_url=overrides.get("base_url", base.base_url),
        default_options=options,
        resolver=overrides["resolver"] if "resolver" in overrides else base.resolver,
        request_middleware=_middleware_or(overrides.get("request_middleware"), base.request_middleware),
        response_middleware=_middleware_or(overrides.get("response_middleware"), base.response_middleware),
    )
    logger.debug(f"Merged configuration overrides: {sorted(overrides)}")
    return merged


def _middleware_or(override: Sequence[Any] | None, inherited: tuple[Any, ...]) -> tuple[Any, ...]:
    return tuple(override) if override is not None else inherited
