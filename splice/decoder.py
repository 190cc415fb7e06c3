"""Decode SPLICE drum pattern files.

Layout (integers big-endian, tempo little-endian)::

  0x00  tag           6 bytes   b"SPLICE"
  0x06  body length   u64       bytes from the version field to the end
                                of the last track record
  0x0E  version       32 bytes  NUL padded text
  0x2E  tempo         f32
  0x32  tracks        repeated until the body length is consumed

Each track record is ``id:u8 | name_len:u32 | name | steps[16]``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .cursor import ByteCursor
from .errors import InvalidHeader, MalformedField
from .pattern import Pattern, Track
from .primitives import (
    MAGIC,
    STEP_COUNT,
    VERSION_SIZE,
    read_fixed_text,
    read_header_tag,
    read_length,
    read_tempo,
    read_u8,
    read_u32_be,
)

logger = logging.getLogger(__name__)

MAX_OFFSET = (1 << 64) - 1


def decode_track(cursor: ByteCursor) -> Track:
    """Read one track record at the cursor.

    The record is not checked against the end of the body: a name length
    that runs past it either exhausts the input or leaves the cursor
    beyond the body, which ends the track loop.
    """
    start = cursor.offset
    track_id = read_u8(cursor)
    name_len = read_u32_be(cursor)
    name = read_fixed_text(cursor, name_len)
    steps = cursor.read_exact(STEP_COUNT)
    logger.debug(
        "track id=%d name=%r at 0x%04X-0x%04X", track_id, name, start, cursor.offset
    )
    return Track(id=track_id, name=name, steps=steps)


def decode(data: bytes | bytearray | memoryview) -> Pattern:
    """Decode a complete SPLICE buffer into a :class:`Pattern`.

    Raises a :class:`~splice.errors.DecodeError` subclass on the first
    failing field. Bytes after the declared body are ignored.
    """
    cursor = ByteCursor(data)

    tag = read_header_tag(cursor)
    if tag != MAGIC:
        raise InvalidHeader(tag)

    length = read_length(cursor)
    body_end = cursor.offset + length
    if body_end > MAX_OFFSET:
        raise MalformedField(
            "body length", f"{length} overflows the offset range from 0x{cursor.offset:X}"
        )
    logger.debug("body 0x%04X-0x%04X (%d bytes)", cursor.offset, body_end, length)

    version = read_fixed_text(cursor, VERSION_SIZE)
    tempo = read_tempo(cursor)

    tracks: List[Track] = []
    while cursor.offset < body_end:
        tracks.append(decode_track(cursor))

    if cursor.offset > body_end:
        logger.debug(
            "last track overran body end by %d bytes", cursor.offset - body_end
        )

    return Pattern(version=version, tempo=tempo, tracks=tuple(tracks))


def decode_file(path: str | Path) -> Pattern:
    """Read ``path`` fully into memory and decode it.

    File system errors surface as ``OSError``, separate from decode errors.
    """
    data = Path(path).read_bytes()
    logger.debug("decoding %s (%d bytes)", path, len(data))
    return decode(data)
