"""Heuristic detection of plain text content."""

from __future__ import annotations

BOMS = (
    b"\xef\xbb\xbf",  # utf-8
    b"\x00\x00\xfe\xff",  # utf-32be
    b"\xff\xfe\x00\x00",  # utf-32le
    b"\xfe\xff",  # utf-16be
    b"\xff\xfe",  # utf-16le
)


def has_bom(content: bytes) -> bool:
    """Return True if the content starts with a known byte order mark."""
    return any(content.startswith(bom) for bom in BOMS)


def _is_binary_byte(b: int) -> bool:
    return b <= 0x08 or b == 0x0B or 0x0E <= b <= 0x1A or 0x1C <= b <= 0x1F


def detect_text(data: bytes) -> bool:
    """Return True if the bytes look like plain text.

    BOM-less UTF-16 and UTF-32 content is not recognised as text.
    """
    if has_bom(data):
        return True
    return not any(_is_binary_byte(b) for b in data)