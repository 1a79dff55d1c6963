"""Per-file driver: open in binary mode, stream chunks through a LineScanner.

I/O failures never raise out of check_file(); they come back as a failed
CheckResult carrying a SourceReadError. Style incidents never fail a file.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import BinaryIO

from sourcecheck.config import CheckConfig, get_check_config
from sourcecheck.errors import SourceReadError
from sourcecheck.incidents import Incident, IncidentKind
from sourcecheck.scanner import LineScanner
from sourcecheck.utils.logger import get_logger

logger = get_logger(__name__)

IncidentCallback = Callable[[Incident], None]


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of checking one file.

    Attributes:
        path: File that was checked
        ok: False only when the file could not be opened or fully read
        incidents: Reported (first-occurrence) incidents in detection order
        counts: Occurrences per kind, including silent repeats
        line_count: EOLs recognized before the scan ended
        error: The I/O failure when ok is False

    """

    path: str
    ok: bool = True
    incidents: tuple[Incident, ...] = ()
    counts: dict[IncidentKind, int] = field(default_factory=dict)
    line_count: int = 0
    error: SourceReadError | None = None

    @property
    def clean(self) -> bool:
        """True when the file was read and nothing was reported."""
        return self.ok and not self.incidents

    def summary_line(self) -> str:
        """One-line counter summary, e.g. ``a.c: 12 line(s), tab=3, crlf=12``."""
        if not self.ok:
            return f"{self.path}: not checked"
        parts = [f"{kind.key}={n}" for kind, n in self.counts.items() if n]
        detail = ", ".join(parts) if parts else "clean"
        return f"{self.path}: {self.line_count} line(s), {detail}"


def iter_chunks(stream: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    """Yield blocks from a binary stream until EOF."""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield chunk


def check_stream(
    stream: BinaryIO,
    *,
    source_file: str | None = None,
    chunk_size: int | None = None,
    on_incident: IncidentCallback | None = None,
) -> CheckResult:
    """Check an already open binary stream.

    OSError from reading propagates; check_file() converts it.
    """
    if chunk_size is None:
        chunk_size = get_check_config().chunk_size
    scanner = LineScanner(source_file)
    incidents: list[Incident] = []
    for incident in scanner.scan(iter_chunks(stream, chunk_size)):
        incidents.append(incident)
        if on_incident is not None:
            on_incident(incident)
    return CheckResult(
        path=source_file or "<stream>",
        incidents=tuple(incidents),
        counts=scanner.counts,
        line_count=scanner.line_count,
    )


def check_file(
    path: str | os.PathLike[str],
    *,
    config: CheckConfig | None = None,
    on_incident: IncidentCallback | None = None,
) -> CheckResult:
    """Check one file.

    Args:
        path: File to check
        config: Settings to use (defaults to the context config)
        on_incident: Called for each incident as soon as it is detected

    Returns:
        CheckResult; ``ok`` is False only on I/O failure.
    """
    config = config or get_check_config()
    name = os.fspath(path)
    logger.debug("Scanning %s (chunk_size=%d)", name, config.chunk_size)
    # Kept so a read failure partway through still returns what was found
    seen: list[Incident] = []

    def collect(incident: Incident) -> None:
        seen.append(incident)
        if on_incident is not None:
            on_incident(incident)

    try:
        with open(path, "rb") as stream:
            result = check_stream(
                stream,
                source_file=name,
                chunk_size=config.chunk_size,
                on_incident=collect,
            )
    except OSError as e:
        error = SourceReadError.from_os_error(name, e)
        logger.debug("Read failed for %s: %s", name, error.strerror)
        return CheckResult(path=name, ok=False, incidents=tuple(seen), error=error)

    logger.debug(
        "Scanned %s: %d line(s), %d incident(s) reported",
        name,
        result.line_count,
        len(result.incidents),
    )
    return result


def check_bytes(data: bytes, source_file: str | None = None) -> CheckResult:
    """Check an in-memory byte string."""
    scanner = LineScanner(source_file)
    incidents = tuple(scanner.scan([data]))
    return CheckResult(
        path=source_file or "<input>",
        incidents=incidents,
        counts=scanner.counts,
        line_count=scanner.line_count,
    )
