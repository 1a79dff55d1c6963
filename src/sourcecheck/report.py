"""Console reporting.

Writes the per-file report lines:

    Checking main.cpp
    main.cpp(4) [ERROR] : Tab character

and perror-style I/O failures on the error stream. All writes go through one
lock so concurrent checks never interleave inside a file's block.
"""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from sourcecheck.checker import CheckResult
from sourcecheck.config import CheckConfig, get_check_config
from sourcecheck.errors import SourceReadError
from sourcecheck.incidents import Incident


class Reporter:
    """Serialized writer for check output.

    Sequential runs stream lines as incidents are detected (announce,
    incident, finish). Parallel runs hand over a whole CheckResult via
    emit_result(), which writes the same lines as one block.
    """

    __slots__ = ("_out", "_err", "_config", "_lock")

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
        config: CheckConfig | None = None,
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._err = err if err is not None else sys.stderr
        self._config = config or get_check_config()
        self._lock = threading.Lock()

    @property
    def config(self) -> CheckConfig:
        return self._config

    def announce(self, path: str) -> None:
        if self._config.announce:
            with self._lock:
                self._write_out([f"Checking {path}"])

    def incident(self, incident: Incident) -> None:
        with self._lock:
            self._write_out([str(incident)])

    def finish(self, result: CheckResult) -> None:
        """Write what follows the incidents: the I/O error or the summary."""
        with self._lock:
            self._write_tail(result)

    def emit_result(self, result: CheckResult) -> None:
        """Write a complete file block at once."""
        lines = [f"Checking {result.path}"] if self._config.announce else []
        lines.extend(str(incident) for incident in result.incidents)
        with self._lock:
            self._write_out(lines)
            self._write_tail(result)

    def _write_tail(self, result: CheckResult) -> None:
        if result.error is not None:
            self._write_err(result.error)
        elif self._config.summary:
            self._write_out([result.summary_line()])

    def _write_out(self, lines: list[str]) -> None:
        if lines:
            self._out.write("".join(f"{line}\n" for line in lines))
            self._out.flush()

    def _write_err(self, error: SourceReadError) -> None:
        # stdout first so the error lands after the file's earlier lines
        self._out.flush()
        self._err.write(f"{error}\n")
        self._err.flush()
