"""Exceptions raised while decoding SPLICE pattern files."""

from __future__ import annotations


class DecodeError(ValueError):
    """Base class for every structural decode failure."""


class InvalidHeader(DecodeError):
    def __init__(self, tag: bytes) -> None:
        super().__init__(f"invalid header: expected b'SPLICE', got {tag!r}")
        self.tag = tag


class TruncatedInput(DecodeError):
    """A field needs more bytes than the input still holds."""

    def __init__(self, offset: int, wanted: int, available: int) -> None:
        super().__init__(
            f"truncated input at 0x{offset:04X}: need {wanted} bytes, "
            f"{available} available"
        )
        self.offset = offset
        self.wanted = wanted
        self.available = available


class MalformedField(DecodeError):
    """A field decoded structurally but holds an unusable value."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"malformed {field}: {message}")
        self.field = field
