"""Decoder for SPLICE drum machine pattern files."""

from .cursor import ByteCursor  # noqa: F401
from .decoder import decode, decode_file, decode_track  # noqa: F401
from .errors import (  # noqa: F401
    DecodeError,
    InvalidHeader,
    MalformedField,
    TruncatedInput,
)
from .pattern import Pattern, Track, format_tempo  # noqa: F401
from .primitives import (  # noqa: F401
    MAGIC,
    STEP_COUNT,
    VERSION_SIZE,
    read_fixed_text,
    read_header_tag,
    read_length,
    read_tempo,
    read_u8,
    read_u32_be,
    trim_nul,
)
