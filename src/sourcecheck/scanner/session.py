"""Per-file scan context."""

from __future__ import annotations

from dataclasses import dataclass, field

from sourcecheck.incidents import IncidentKind
from sourcecheck.scanner.modes import ScanState


def _zero_counts() -> dict[IncidentKind, int]:
    return {kind: 0 for kind in IncidentKind if kind is not IncidentKind.MISSING_EOL}


@dataclass(slots=True)
class ScanSession:
    """Mutable state for scanning one file.

    Counters only grow. A category is reported on its 0 -> 1 transition;
    later occurrences are counted silently.

    Attributes:
        state: Current scanner state
        line_count: EOLs recognized so far
        missing_eol: Set once at end of input when the last line is unterminated

    """

    state: ScanState = ScanState.BEGINNING_OF_LINE
    line_count: int = 0
    missing_eol: bool = False
    _counts: dict[IncidentKind, int] = field(default_factory=_zero_counts)

    @property
    def current_lineno(self) -> int:
        """1-based number of the line being scanned."""
        return self.line_count + 1

    def record(self, kind: IncidentKind) -> bool:
        """Count one occurrence of ``kind``.

        Returns:
            True if this is the first occurrence (the one to report).
        """
        if kind is IncidentKind.MISSING_EOL:
            first = not self.missing_eol
            self.missing_eol = True
            return first
        self._counts[kind] += 1
        return self._counts[kind] == 1

    @property
    def counts(self) -> dict[IncidentKind, int]:
        """Snapshot of every counter, MISSING_EOL as 0 or 1."""
        snapshot = dict(self._counts)
        snapshot[IncidentKind.MISSING_EOL] = int(self.missing_eol)
        return snapshot
