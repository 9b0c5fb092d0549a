"""Response formats understood by the bookseller API.

The enum value doubles as the media type sent in the ``Accept`` header, so
the dispatch key and the wire negotiation can never drift apart.
"""

from __future__ import annotations

from enum import Enum


class ResponseFormat(str, Enum):
    """Closed set of wire encodings a request handler can expect."""

    JSON = "application/json"
    XML = "application/xml"

    @classmethod
    def default(cls) -> "ResponseFormat":
        """Return the format used when the caller does not pick one."""

        return cls.JSON

    @classmethod
    def from_name(cls, name: str) -> "ResponseFormat":
        """Resolve a short name (``json``/``xml``) or a media type."""

        value = name.strip().lower()
        for member in cls:
            if value in (member.name.lower(), member.value):
                return member
        raise ValueError(f"Unknown response format: {name!r}")

    def label(self) -> str:
        """Short name for prompts and logging."""

        return self.name.lower()
