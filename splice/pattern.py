from __future__ import annotations

from dataclasses import dataclass
import struct
from typing import Any, Dict, List, Tuple


STEPS_PER_GROUP = 4


def format_tempo(tempo: float) -> str:
    """Shortest decimal text that reads back as the same 32-bit float."""

    for digits in range(10):
        text = f"{tempo:.{digits}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if struct.unpack("<f", struct.pack("<f", float(text)))[0] == tempo:
            return text
    return repr(tempo)


@dataclass(frozen=True)
class Track:
    """One percussion lane: id byte, name and 16 raw step bytes."""

    id: int
    name: str
    steps: bytes

    def active_steps(self) -> List[int]:
        """0-based indices of steps switched on (byte value 1)."""

        return [idx for idx, step in enumerate(self.steps) if step == 1]

    def render_steps(self) -> str:
        cells = []
        for idx, step in enumerate(self.steps):
            if idx % STEPS_PER_GROUP == 0:
                cells.append("|")
            cells.append("x" if step == 1 else "-")
        cells.append("|")
        return "".join(cells)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "steps": list(self.steps)}


@dataclass(frozen=True)
class Pattern:
    """A fully decoded SPLICE file.

    Instances only come out of :func:`splice.decoder.decode`; tracks keep
    their on-disk order.

    Equality compares the tempo by its 32-bit encoding, so two decodes of
    the same bytes are equal even when the tempo is NaN.
    """

    version: str
    tempo: float
    tracks: Tuple[Track, ...]

    def _key(self) -> Tuple[str, bytes, Tuple[Track, ...]]:
        return (self.version, struct.pack("<f", self.tempo), self.tracks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def render(self) -> str:
        lines = [
            f"Saved with HW Version: {self.version}",
            f"Tempo: {format_tempo(self.tempo)}",
        ]
        for track in self.tracks:
            lines.append(f"({track.id}) {track.name}\t{track.render_steps()}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "tempo": self.tempo,
            "tracks": [track.to_dict() for track in self.tracks],
        }
