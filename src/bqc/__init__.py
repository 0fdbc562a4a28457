"""
BQC - Balanced Quad Carry numeral system.

Maps each integer 0-2078 to a short token and back, one-to-one.

Usage:
    from bqc import encode, decode

    encode(39)            # "b9_0_0_0"
    decode("za0_0_0_0")   # 1040
"""

from .core.codec import (
    BLOCK_SIZE,
    MAX_VALUE,
    canonicalize,
    decode,
    encode,
    is_valid_token,
    series_range,
    series_tokens,
    split_token,
)
from .core.errors import (
    BQCError,
    InvalidInput,
    InvalidQuad,
    MalformedToken,
    SeriesOutOfRange,
)

__all__ = [
    "BLOCK_SIZE",
    "MAX_VALUE",
    "canonicalize",
    "decode",
    "encode",
    "is_valid_token",
    "series_range",
    "series_tokens",
    "split_token",
    "BQCError",
    "InvalidInput",
    "InvalidQuad",
    "MalformedToken",
    "SeriesOutOfRange",
]
