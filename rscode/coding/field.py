"""
GF(2^8) arithmetic parameterized by an 8-bit reduction polynomial.

The polynomial is given without its implicit x^8 term, so 0x1D stands for
x^8 + x^4 + x^3 + x^2 + 1. It must be irreducible over GF(2); nothing here
checks that except :func:`is_field_polynomial`.
"""

from __future__ import annotations

FIELD_SIZE = 256
DEFAULT_POLYNOMIAL = 0x4D  # x^8 + x^6 + x^3 + x^2 + 1


def check_polynomial(pol: int) -> None:
    """Raise ``ValueError`` unless ``pol`` fits in a byte."""
    if isinstance(pol, bool) or not isinstance(pol, int) or not 0 <= pol < FIELD_SIZE:
        raise ValueError(f"reduction polynomial must be an int in [0, 255], got {pol!r}")


def multiply(a: int, b: int, pol: int) -> int:
    """Carry-less product of ``a`` and ``b`` reduced modulo ``pol``."""
    product = 0
    while b:
        if b & 1:
            product ^= a
        carry = a & 0x80
        a = (a << 1) & 0xFF
        if carry:
            a ^= pol
        b >>= 1
    return product


def invert(a: int, pol: int) -> int:
    """
    Multiplicative inverse of ``a``, computed as a^254.

    a^254 = a^2 * a^4 * a^8 * a^16 * a^32 * a^64 * a^128, so seven squarings
    accumulated into the result are enough.
    """
    if a == 0:
        raise ZeroDivisionError("0 has no multiplicative inverse in GF(2^8)")
    result = 1
    square = a
    for _ in range(7):
        square = multiply(square, square, pol)
        result = multiply(result, square, pol)
    return result


def is_field_polynomial(pol: int) -> bool:
    """Return True if every nonzero element is invertible under ``pol``."""
    check_polynomial(pol)
    return all(multiply(a, invert(a, pol), pol) == 1 for a in range(1, FIELD_SIZE))


__all__ = [
    "DEFAULT_POLYNOMIAL",
    "FIELD_SIZE",
    "check_polynomial",
    "invert",
    "is_field_polynomial",
    "multiply",
]
