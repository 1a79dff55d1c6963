"""
sourcecheck: byte-level style checker for source files

Reports, once per category per file, tab characters, Windows (CR,LF) and
old MacOS (CR) line endings, unexpected control characters, malformed UTF-8
sequences and a missing newline at end of file. Files are read as raw bytes
in one streaming pass.

Quick Start:
    >>> from sourcecheck import check_bytes
    >>> result = check_bytes(b"int\\tx;\\n", "demo.c")
    >>> for incident in result.incidents:
    ...     print(incident)
    demo.c(1) [ERROR] : Tab character

    >>> # Files, with I/O failures returned instead of raised
    >>> from sourcecheck import check_file
    >>> result = check_file("src/main.cpp")
    >>> result.ok
    True

Command line:
    sourcecheck src/*.cpp src/*.h
"""

__version__ = "0.1.0"

from sourcecheck.checker import CheckResult, check_bytes, check_file, check_stream
from sourcecheck.config import (
    CheckConfig,
    check_config_context,
    get_check_config,
    load_config,
    reset_check_config,
    set_check_config,
)
from sourcecheck.errors import (
    ConfigError,
    ScannerStateError,
    SourceCheckError,
    SourceReadError,
)
from sourcecheck.incidents import Incident, IncidentKind
from sourcecheck.scanner import LineScanner, ScanSession, ScanState

__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "check_bytes",
    "check_file",
    "check_stream",
    "CheckResult",
    # Scanner
    "LineScanner",
    "ScanSession",
    "ScanState",
    # Incidents
    "Incident",
    "IncidentKind",
    # Errors
    "SourceCheckError",
    "SourceReadError",
    "ScannerStateError",
    "ConfigError",
    # Configuration (ContextVar-based)
    "CheckConfig",
    "load_config",
    "get_check_config",
    "set_check_config",
    "reset_check_config",
    "check_config_context",
]
