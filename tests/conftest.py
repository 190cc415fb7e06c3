from __future__ import annotations

from pathlib import Path
import struct
import sys
from typing import Iterable, Tuple

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

KICK_STEPS = bytes([1, 0, 0, 0] * 4)


def track_record(track_id: int, name: bytes, steps: bytes) -> bytes:
    return bytes([track_id]) + struct.pack(">I", len(name)) + name + steps


def splice_bytes(
    version: bytes = b"0.808-alpha",
    tempo: float = 120.0,
    tracks: Iterable[Tuple[int, bytes, bytes]] = ((0, b"kick", KICK_STEPS),),
    *,
    tag: bytes = b"SPLICE",
    length: int | None = None,
    trailer: bytes = b"",
) -> bytes:
    """Assemble a SPLICE file; ``length`` overrides the computed body length."""
    body = version.ljust(32, b"\x00") + struct.pack("<f", tempo)
    body += b"".join(track_record(*t) for t in tracks)
    if length is None:
        length = len(body)
    return tag + struct.pack(">Q", length) + body + trailer


@pytest.fixture
def canonical() -> bytes:
    return splice_bytes()


@pytest.fixture
def build():
    return splice_bytes
