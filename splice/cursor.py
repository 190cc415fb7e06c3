from __future__ import annotations

from .errors import TruncatedInput


class ByteCursor:
    """Forward-only reader over an in-memory byte buffer."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read_exact(self, n: int) -> bytes:
        """Return the next ``n`` bytes and advance past them.

        Raises ``TruncatedInput`` without moving the offset when fewer
        than ``n`` bytes are left.
        """
        if n < 0:
            raise ValueError(f"cannot read a negative byte count ({n})")
        if n > self.remaining:
            raise TruncatedInput(self._offset, n, self.remaining)
        start = self._offset
        self._offset += n
        return self._data[start : self._offset]
