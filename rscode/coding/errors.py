"""
Exceptions raised by the Reed-Solomon encoder and decoder.
"""

from __future__ import annotations


class ReedSolomonError(Exception):
    """Base class for decode failures."""


class InsufficientSymbols(ReedSolomonError):
    """Fewer surviving symbols than unknown message coefficients."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"need {required} surviving symbols to decode, only {available} available"
        )


class SingularSystem(ReedSolomonError):
    """The interpolation system has no unique solution (e.g. repeated points)."""


class InvalidErasures(ReedSolomonError, ValueError):
    """Erasure positions that are duplicated, non-integer or out of range."""


__all__ = [
    "InsufficientSymbols",
    "InvalidErasures",
    "ReedSolomonError",
    "SingularSystem",
]
