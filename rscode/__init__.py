"""
Reed-Solomon erasure coding over GF(2^8).
"""

from .coding import (
    InsufficientSymbols,
    InvalidErasures,
    ReedSolomonError,
    SingularSystem,
    decode,
    encode,
)
from .coding.field import DEFAULT_POLYNOMIAL
from .shared.utils import InvalidEncoding, bytes_to_text, text_to_bytes

__all__ = [
    "DEFAULT_POLYNOMIAL",
    "InsufficientSymbols",
    "InvalidEncoding",
    "InvalidErasures",
    "ReedSolomonError",
    "SingularSystem",
    "bytes_to_text",
    "decode",
    "encode",
    "text_to_bytes",
]
