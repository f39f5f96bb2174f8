"""Response body decoders keyed by resolver kind."""

import io
import logging
from collections.abc import Callable
from email import policy
from email.parser import BytesParser
from enum import StrEnum
from typing import Any

import httpx

from httpplz.errors.exceptions import InvalidInputError, ResolverError
from httpplz.utils.body import FORM_URLENCODED, FormData

logger = logging.getLogger(__name__)


class ResolverKind(StrEnum):
    """How a successful response body is decoded into ``ResponseEnvelope.data``."""

    JSON = "json"
    TEXT = "text"
    BLOB = "blob"
    BINARY = "binary"
    FORM = "form"


def resolve_kind(value: "ResolverKind | str | None") -> ResolverKind | None:
    """Normalize a resolver given as enum member, string or None.

    Raises:
        InvalidInputError: If the string names no known resolver
    """
    if value is None or isinstance(value, ResolverKind):
        return value
    try:
        return ResolverKind(value)
    except ValueError:
        choices = ", ".join(kind.value for kind in ResolverKind)
        raise InvalidInputError(f"Unknown resolver {value!r} (expected one of: {choices})") from None


def _decode_multipart(response: httpx.Response) -> FormData:
    content_type = response.headers["content-type"]
    # The email parser needs the boundary from the header in front of the payload
    raw = b"Content-Type: " + content_type.encode("latin-1") + b"\r\n\r\n" + response.content
    message = BytesParser(policy=policy.HTTP).parsebytes(raw)
    if not message.is_multipart():
        raise ResolverError("Malformed multipart/form-data response body")

    form = FormData()
    for part in message.iter_parts():
        name = part.get_param("name", header="content-disposition")
        if name is None:
            continue
        payload = part.get_payload(decode=True) or b""
        filename = part.get_filename()
        if filename is None:
            form.append(name, payload.decode(part.get_content_charset() or "utf-8"))
        else:
            form.add_file(name, payload, filename=filename, content_type=part.get_content_type())
    return form


def _decode_form(response: httpx.Response) -> httpx.QueryParams | FormData:
    content_type = response.headers.get("content-type", "").lower()
    if content_type.startswith("multipart/form-data"):
        return _decode_multipart(response)
    if content_type.startswith(FORM_URLENCODED):
        return httpx.QueryParams(response.text)
    raise ResolverError(f"Cannot decode form data from content type {content_type or '<none>'!r}")


_DECODERS: dict[ResolverKind, Callable[[httpx.Response], Any]] = {
    ResolverKind.JSON: lambda response: response.json(),
    ResolverKind.TEXT: lambda response: response.text,
    ResolverKind.BLOB: lambda response: io.BytesIO(response.content),
    ResolverKind.BINARY: lambda response: response.content,
    ResolverKind.FORM: _decode_form,
}


async def decode_response(response: httpx.Response, kind: ResolverKind) -> Any:
    """Read ``response`` and decode its body with the decoder for ``kind``.

    Decoder failures (for example malformed JSON) propagate unchanged.
    """
    await response.aread()
    logger.debug(f"Decoding response body as {kind.value}")
    return _DECODERS[kind](response)
