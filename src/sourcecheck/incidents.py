"""Incident kinds and records.

An Incident is one reported style violation: its kind, the 1-based line it
was detected on, and optionally the file it came from.

Thread Safety:
Incident is frozen (immutable) and safe to share across threads.
IncidentKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IncidentKind(Enum):
    """Style violation categories. Values are the user-facing messages."""

    TAB = "Tab character"
    BAD_UTF8 = "Bad multibyte sequence"
    CONTROL_CHAR = "Unexpected control character"
    CRLF = "Windows newline sequence (CR,LF)"
    LONE_CR = "Old-time MacOS newline sequence (CR)"
    MISSING_EOL = "Missing EOL at end of file"

    @property
    def message(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """Short lowercase name used in summaries."""
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Incident:
    """A style violation found by the scanner.

    Attributes:
        kind: Violation category
        lineno: Line the incident was detected on (1-indexed)
        source_file: Source file path (optional)

    Examples:
            >>> str(Incident(IncidentKind.TAB, 3, "main.cpp"))
            'main.cpp(3) [ERROR] : Tab character'

    """

    kind: IncidentKind
    lineno: int
    source_file: str | None = None

    @property
    def message(self) -> str:
        return self.kind.message

    def format(self, source_file: str | None = None) -> str:
        """Format as a report line.

        Args:
            source_file: Name to print, overriding the stored one

        Returns:
            ``<filename>(<lineno>) [ERROR] : <message>``
        """
        name = source_file if source_file is not None else self.source_file
        return f"{name or '<input>'}({self.lineno}) [ERROR] : {self.kind.message}"

    def __str__(self) -> str:
        return self.format()
