"""RFC 7807 Problem Details models."""

from dataclasses import dataclass
from typing import Any

STANDARD_FIELDS = frozenset({"type", "title", "status", "detail", "instance"})


@dataclass
class ProblemDetail:
    """RFC 7807 Problem Details object.

    See: https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str | None = None  # URI reference identifying the problem type
    title: str | None = None  # Short, human-readable summary
    status: int | None = None  # HTTP status code
    detail: str | None = None  # Human-readable explanation
    instance: str | None = None  # URI reference identifying specific occurrence

    # Extension members (additional fields from API)
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_body(cls, body: Any) -> "ProblemDetail | None":
        """Build problem details from an already parsed error body.

        Args:
            body: Parsed error payload (dict when the response was JSON)

        Returns:
            ProblemDetail object or None if the body does not look like RFC 7807
        """
        if not isinstance(body, dict):
            return None

        # Needs at least one standard member to count as a problem document
        if not any(field in body for field in STANDARD_FIELDS):
            return None

        extensions = {k: v for k, v in body.items() if k not in STANDARD_FIELDS}

        return cls(
            type=body.get("type"),
            title=body.get("title"),
            status=body.get("status"),
            detail=body.get("detail"),
            instance=body.get("instance"),
            extensions=extensions if extensions else None,
        )

    def to_exception_message(self) -> str:
        """Convert problem details to exception message lines."""
        lines = []

        if self.title:
            lines.append(self.title)
        elif self.detail:
            lines.append(self.detail)

        if self.title and self.detail and self.title != self.detail:
            lines.append(self.detail)

        if self.type:
            lines.append(f"Problem Type: {self.type}")

        if self.instance:
            lines.append(f"Instance: {self.instance}")

        if self.extensions:
            lines.append("Extension fields:")
            for key, value in self.extensions.items():
                lines.append(f"  - {key}: {value}")

        return "\n".join(lines)
