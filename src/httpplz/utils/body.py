"""Classify request bodies into transport-ready payloads."""

import io
import json
from dataclasses import dataclass, field
from typing import Any

import httpx

FORM_URLENCODED = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


@dataclass
class FormData:
    """Multipart form payload.

    ``fields`` holds plain form values, ``files`` holds uploads in any shape
    httpx accepts for ``files=`` (bytes, file objects or
    ``(filename, content, content_type)`` tuples).
    """

    fields: dict[str, Any] = field(default_factory=dict)
    files: dict[str, Any] = field(default_factory=dict)

    def append(self, name: str, value: Any) -> None:
        """Add a plain field, keeping earlier values under the same name."""
        if name in self.fields:
            current = self.fields[name]
            if not isinstance(current, list):
                current = [current]
            self.fields[name] = [*current, value]
        else:
            self.fields[name] = value

    def add_file(self, name: str, content: Any, filename: str | None = None, content_type: str | None = None) -> None:
        """Add an upload under ``name``."""
        if filename is None and content_type is None:
            self.files[name] = content
        else:
            self.files[name] = (filename, content, content_type)


@dataclass(frozen=True)
class CoercedBody:
    processed_body: Any
    content_type: str | None = None


def coerce_body(body: Any) -> CoercedBody:
    """Classify ``body`` and attach a Content-Type hint where one is implied.

    Precedence (first match wins):
    1. ``FormData`` - unchanged, no hint (the transport sets the multipart boundary)
    2. ``httpx.QueryParams`` - unchanged, ``application/x-www-form-urlencoded``
    3. ``str`` - unchanged, no hint
    4. binary file object (``io.IOBase``) - unchanged, no hint
    5. ``bytes`` / ``bytearray`` / ``memoryview`` - unchanged, no hint
    6. anything else - serialized with ``json.dumps``, ``application/json``
    """
    if isinstance(body, FormData):
        return CoercedBody(body)

    if isinstance(body, httpx.QueryParams):
        return CoercedBody(body, FORM_URLENCODED)

    if isinstance(body, str):
        return CoercedBody(body)

    if isinstance(body, io.IOBase):
        return CoercedBody(body)

    if isinstance(body, (bytes, bytearray, memoryview)):
        return CoercedBody(body)

    return CoercedBody(json.dumps(body), JSON_CONTENT_TYPE)
