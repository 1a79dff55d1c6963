"""Streaming line scanner with O(1) state.

Consumes raw bytes left to right, one at a time, and detects EOL conventions
and UTF-8 sequence shape in the same pass. Nothing is buffered; chunks may
split a CRLF pair or a multi-byte sequence anywhere.

Two transitions consume no input: a CR followed by something other than LF,
and a broken UTF-8 sequence. The byte is then dispatched again against the
new state. `_step` returns whether it consumed the byte and the feed loop
repeats the step until it did. feed() scans its whole chunk before
returning, so nothing depends on the caller consuming the result.

Thread Safety:
LineScanner instances are single-use. Create one per file.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sourcecheck.errors import ScannerStateError
from sourcecheck.incidents import Incident, IncidentKind
from sourcecheck.scanner.classifiers import (
    LF,
    ByteClass,
    classify_byte,
    is_utf8_trailer,
    utf8_continuations,
)
from sourcecheck.scanner.modes import ScanState
from sourcecheck.scanner.session import ScanSession


class LineScanner:
    """Byte-level state machine for source style checks.

    Usage:
            >>> scanner = LineScanner("demo.c")
            >>> for incident in scanner.scan([b"int\\tx;\\r\\n"]):
            ...     print(incident)
        demo.c(1) [ERROR] : Tab character
        demo.c(1) [ERROR] : Windows newline sequence (CR,LF)

    """

    __slots__ = (
        "_session",
        "_source_file",
        "_pending",  # Incidents detected but not yet returned
        "_finished",
    )

    def __init__(self, source_file: str | None = None) -> None:
        """Initialize scanner.

        Args:
            source_file: Optional file name stamped on every incident
        """
        self._session = ScanSession()
        self._source_file = source_file
        self._pending: list[Incident] = []
        self._finished = False

    # =========================================================================
    # Public interface
    # =========================================================================

    @property
    def session(self) -> ScanSession:
        return self._session

    @property
    def state(self) -> ScanState:
        return self._session.state

    @property
    def line_count(self) -> int:
        return self._session.line_count

    @property
    def counts(self) -> dict[IncidentKind, int]:
        return self._session.counts

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def source_file(self) -> str | None:
        return self._source_file

    def feed(self, data: bytes) -> list[Incident]:
        """Consume a whole chunk of input.

        The chunk is scanned before this returns, whether or not the result
        is used.

        Returns:
            First-occurrence incidents detected in this chunk, in order.

        Raises:
            ScannerStateError: If finish() was already called.
        """
        if self._finished:
            raise ScannerStateError("cannot feed a finished scanner")
        step = self._step
        for byte in data:
            while not step(byte):
                pass
        return self._drain()

    def finish(self) -> list[Incident]:
        """Handle end of input.

        A pending CR completes as a lone-CR EOL, a truncated UTF-8 sequence
        counts as bad, and an unterminated last line is reported once.
        Calling it again returns nothing.
        """
        if self._finished:
            return []
        self._finished = True
        session = self._session

        if session.state is ScanState.AFTER_CR:
            self._end_line(IncidentKind.LONE_CR)
        elif session.state.pending:
            self._report(IncidentKind.BAD_UTF8)
            session.state = ScanState.NORMAL

        if session.state is not ScanState.BEGINNING_OF_LINE:
            self._report(IncidentKind.MISSING_EOL)

        return self._drain()

    def scan(self, chunks: Iterable[bytes]) -> Iterator[Incident]:
        """Feed every chunk, then finish, yielding incidents chunk by chunk."""
        for chunk in chunks:
            yield from self.feed(chunk)
        yield from self.finish()

    # =========================================================================
    # State machine
    # =========================================================================

    def _step(self, byte: int) -> bool:
        """Dispatch one byte against the current state.

        Returns:
            False when the byte must be dispatched again.
        """
        state = self._session.state
        if state is ScanState.BEGINNING_OF_LINE or state is ScanState.NORMAL:
            return self._step_in_line(byte)
        if state is ScanState.AFTER_CR:
            return self._step_after_cr(byte)
        return self._step_continuation(byte)

    def _step_in_line(self, byte: int) -> bool:
        """Shared logic for BEGINNING_OF_LINE and NORMAL."""
        session = self._session
        match classify_byte(byte):
            case ByteClass.LF:
                session.line_count += 1
                session.state = ScanState.BEGINNING_OF_LINE
            case ByteClass.CR:
                session.state = ScanState.AFTER_CR
            case ByteClass.LEAD_3 | ByteClass.LEAD_2 | ByteClass.LEAD_1:
                session.state = ScanState.expecting(utf8_continuations(byte))
            case ByteClass.TAB:
                session.state = ScanState.NORMAL
                self._report(IncidentKind.TAB)
            case ByteClass.TRAILER:
                # Orphan trailer
                session.state = ScanState.NORMAL
                self._report(IncidentKind.BAD_UTF8)
            case ByteClass.CONTROL:
                session.state = ScanState.NORMAL
                self._report(IncidentKind.CONTROL_CHAR)
            case ByteClass.PLAIN:
                session.state = ScanState.NORMAL
        return True

    def _step_after_cr(self, byte: int) -> bool:
        if byte == LF:
            self._end_line(IncidentKind.CRLF)
            return True
        self._end_line(IncidentKind.LONE_CR)
        return False

    def _step_continuation(self, byte: int) -> bool:
        session = self._session
        if is_utf8_trailer(byte):
            session.state = session.state.after_trailer
            return True
        self._report(IncidentKind.BAD_UTF8)
        session.state = ScanState.NORMAL
        return False

    # =========================================================================
    # Incident bookkeeping
    # =========================================================================

    def _end_line(self, kind: IncidentKind) -> None:
        """Report a CR-based EOL against the line it ends, then start a new line."""
        session = self._session
        self._report(kind)
        session.line_count += 1
        session.state = ScanState.BEGINNING_OF_LINE

    def _report(self, kind: IncidentKind) -> None:
        if self._session.record(kind):
            self._pending.append(
                Incident(kind, self._session.current_lineno, self._source_file)
            )

    def _drain(self) -> list[Incident]:
        incidents = list(self._pending)
        self._pending.clear()
        return incidents
