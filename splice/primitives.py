"""Typed field reads for the SPLICE layout.

Integers are stored big-endian; the tempo float is stored little-endian.
Each reader is bound to the byte order of the field it serves.
"""

from __future__ import annotations

import struct

from .cursor import ByteCursor

MAGIC = b"SPLICE"
TAG_SIZE = 6
LENGTH_SIZE = 8
VERSION_SIZE = 32
TEMPO_SIZE = 4
STEP_COUNT = 16


def trim_nul(raw: bytes) -> bytes:
    """Drop the trailing run of NUL bytes; leading and embedded NULs stay."""

    return raw.rstrip(b"\x00")


def read_header_tag(cursor: ByteCursor) -> bytes:
    return cursor.read_exact(TAG_SIZE)


def read_length(cursor: ByteCursor) -> int:
    return struct.unpack(">Q", cursor.read_exact(LENGTH_SIZE))[0]


def read_tempo(cursor: ByteCursor) -> float:
    return struct.unpack("<f", cursor.read_exact(TEMPO_SIZE))[0]


def read_fixed_text(cursor: ByteCursor, n: int) -> str:
    return trim_nul(cursor.read_exact(n)).decode("utf-8", errors="replace")


def read_u8(cursor: ByteCursor) -> int:
    return cursor.read_exact(1)[0]


def read_u32_be(cursor: ByteCursor) -> int:
    return struct.unpack(">I", cursor.read_exact(4))[0]
