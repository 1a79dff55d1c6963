"""Exception classes for sourcecheck.

Style incidents (tabs, CRLF, bad encoding, ...) are never exceptions; they are
reported as Incident records. Exceptions cover I/O failures, scanner misuse and
invalid configuration.
"""

from __future__ import annotations

import os


class SourceCheckError(Exception):
    """Base exception for all sourcecheck errors.

    Subclass this for specific error categories.
    """

    pass


class SourceReadError(SourceCheckError):
    """A file could not be opened or read to the end.

    Fatal for that one file. The message mirrors perror():
    ``<path>: <os error text>``.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        strerror: str | None = None,
        errno: int | None = None,
    ) -> None:
        """Initialize read error.

        Args:
            path: File that failed
            strerror: Operating system error text
            errno: Operating system error number (optional)
        """
        self.path = os.fspath(path)
        self.strerror = strerror or "read error"
        self.errno = errno
        super().__init__(f"{self.path}: {self.strerror}")

    @classmethod
    def from_os_error(
        cls, path: str | os.PathLike[str], exc: OSError
    ) -> SourceReadError:
        """Build from an OSError, keeping it as the cause."""
        err = cls(path, exc.strerror or str(exc), exc.errno)
        err.__cause__ = exc
        return err


class ScannerStateError(SourceCheckError):
    """A LineScanner was used after its input was finished."""

    pass


class ConfigError(SourceCheckError):
    """Invalid configuration value or unreadable configuration file."""

    def __init__(self, message: str, key: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Description of the problem
            key: Offending setting name (optional)
        """
        self.key = key
        prefix = f"'{key}': " if key else ""
        super().__init__(f"{prefix}{message}")
