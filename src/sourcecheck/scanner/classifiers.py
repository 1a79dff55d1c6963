"""Byte classification for O(1) dispatch.

Pure, stateless predicates mapping one byte value (0-255) to its structural
role. Multi-byte checks only look at the high bits, so they say nothing about
overlong forms or codepoint ranges.

Bit patterns:
    0xxxxxxx  ASCII (control when < 0x20)
    10xxxxxx  continuation (trailer)
    110xxxxx  lead, 1 continuation follows
    1110xxxx  lead, 2 continuations follow
    11110xxx  lead, 3 continuations follow
"""

from __future__ import annotations

from enum import Enum, auto

LF = 0x0A
CR = 0x0D
TAB = 0x09

# Bytes below this value are C0 control codes
CONTROL_LIMIT = 0x20


class ByteClass(Enum):
    """Structural role of a single byte."""

    LF = auto()
    CR = auto()
    TAB = auto()
    LEAD_3 = auto()  # 11110xxx
    LEAD_2 = auto()  # 1110xxxx
    LEAD_1 = auto()  # 110xxxxx
    TRAILER = auto()  # 10xxxxxx
    CONTROL = auto()
    PLAIN = auto()


def is_utf8_trailer(b: int) -> bool:
    return (b & 0xC0) == 0x80


def is_utf8_lead_of_1_continuation(b: int) -> bool:
    return (b & 0xE0) == 0xC0


def is_utf8_lead_of_2_continuations(b: int) -> bool:
    return (b & 0xF0) == 0xE0


def is_utf8_lead_of_3_continuations(b: int) -> bool:
    return (b & 0xF8) == 0xF0


def is_control_byte(b: int) -> bool:
    """Check for a C0 control byte.

    TAB, CR and LF also match; callers dispatch those first.
    """
    return b < CONTROL_LIMIT


def utf8_continuations(b: int) -> int:
    """Number of continuation bytes announced by a lead byte.

    Returns:
        3, 2 or 1 for a lead byte, 0 for anything else.
    """
    if is_utf8_lead_of_3_continuations(b):
        return 3
    if is_utf8_lead_of_2_continuations(b):
        return 2
    if is_utf8_lead_of_1_continuation(b):
        return 1
    return 0


def classify_byte(b: int) -> ByteClass:
    """Classify one byte.

    Order matters only for TAB/CR/LF, which are also control bytes; the
    remaining patterns are disjoint.
    """
    if b == LF:
        return ByteClass.LF
    if b == CR:
        return ByteClass.CR
    if b == TAB:
        return ByteClass.TAB
    if is_utf8_lead_of_3_continuations(b):
        return ByteClass.LEAD_3
    if is_utf8_lead_of_2_continuations(b):
        return ByteClass.LEAD_2
    if is_utf8_lead_of_1_continuation(b):
        return ByteClass.LEAD_1
    if is_utf8_trailer(b):
        return ByteClass.TRAILER
    if is_control_byte(b):
        return ByteClass.CONTROL
    return ByteClass.PLAIN
