"""
Reed-Solomon Erasure Coding Module
Exports encode, decode, the GF(2^8) primitives and channel simulators
"""

from .decoder import decode
from .encoder import encode, evaluate
from .errors import InsufficientSymbols, InvalidErasures, ReedSolomonError, SingularSystem
from .field import invert, is_field_polynomial, multiply
from .matrix import solve
from .sim import burst_erasures, gilbert_elliott_erasures

__all__ = [
    "InsufficientSymbols",
    "InvalidErasures",
    "ReedSolomonError",
    "SingularSystem",
    "burst_erasures",
    "decode",
    "encode",
    "evaluate",
    "gilbert_elliott_erasures",
    "invert",
    "is_field_polynomial",
    "multiply",
    "solve",
]
