"""Byte-level state-machine scanner for sourcecheck.

Architecture:
scanner/
├── __init__.py          # Re-exports LineScanner, ScanState, ScanSession
├── core.py              # LineScanner (feed/finish, re-dispatch loop)
├── modes.py             # ScanState enum
├── session.py           # ScanSession per-file counters
└── classifiers.py       # Pure byte predicates (UTF-8 shape, control bytes)

Usage:
    >>> from sourcecheck.scanner import LineScanner
    >>> scanner = LineScanner("a.txt")
    >>> [str(i) for i in scanner.scan([b"AB"])]
    ['a.txt(1) [ERROR] : Missing EOL at end of file']

"""

from sourcecheck.scanner.classifiers import ByteClass, classify_byte
from sourcecheck.scanner.core import LineScanner
from sourcecheck.scanner.modes import ScanState
from sourcecheck.scanner.session import ScanSession

__all__ = [
    "ByteClass",
    "LineScanner",
    "ScanSession",
    "ScanState",
    "classify_byte",
]
