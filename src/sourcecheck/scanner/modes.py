"""Scanner states.

This module defines the finite state machine states for the line scanner.
"""

from __future__ import annotations

from enum import Enum


class ScanState(Enum):
    """Line scanner states.

    Exactly one is active at any time:
    - BEGINNING_OF_LINE: Start of file, or right after an EOL
    - NORMAL: Inside a line, after a complete character
    - AFTER_CR: A CR was seen; LF (CRLF) or anything else (lone CR) decides
    - EXPECT_CONTINUATION_n: n more UTF-8 continuation bytes are required

    """

    BEGINNING_OF_LINE = "beginning_of_line"
    NORMAL = "normal"
    AFTER_CR = "after_cr"
    EXPECT_CONTINUATION_3 = "expect_continuation_3"
    EXPECT_CONTINUATION_2 = "expect_continuation_2"
    EXPECT_CONTINUATION_1 = "expect_continuation_1"

    @property
    def pending(self) -> int:
        """Continuation bytes still required (0 outside a sequence)."""
        return _PENDING.get(self, 0)

    @property
    def after_trailer(self) -> ScanState:
        """State reached when one more continuation byte arrives."""
        return _AFTER_TRAILER[self]

    @classmethod
    def expecting(cls, count: int) -> ScanState:
        """Continuation state awaiting ``count`` (1-3) more bytes."""
        return _EXPECTING[count]


_PENDING = {
    ScanState.EXPECT_CONTINUATION_3: 3,
    ScanState.EXPECT_CONTINUATION_2: 2,
    ScanState.EXPECT_CONTINUATION_1: 1,
}

_EXPECTING = {count: state for state, count in _PENDING.items()}

_AFTER_TRAILER = {
    ScanState.EXPECT_CONTINUATION_3: ScanState.EXPECT_CONTINUATION_2,
    ScanState.EXPECT_CONTINUATION_2: ScanState.EXPECT_CONTINUATION_1,
    ScanState.EXPECT_CONTINUATION_1: ScanState.NORMAL,
}
