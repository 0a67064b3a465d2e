"""
Non-systematic Reed-Solomon encoder: evaluate the message polynomial at each
interpolation point.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..shared.metrics import CodingMetrics
from .field import FIELD_SIZE, check_polynomial, multiply

MAX_MESSAGE_LEN = FIELD_SIZE - 1


def _check_elements(values: Sequence[int], name: str) -> None:
    for value in values:
        if not 0 <= value < FIELD_SIZE:
            raise ValueError(f"{name} contains {value!r}, outside GF(2^8)")


def evaluate(message: Sequence[int], x: int, pol: int) -> int:
    """Evaluate ``message`` (index 0 = constant term) at ``x`` with Horner's method."""
    result = message[-1]
    for coefficient in reversed(message[:-1]):
        result = multiply(result, x, pol) ^ coefficient
    return result


def encode(
    message: Sequence[int],
    points: Sequence[int],
    pol: int,
    *,
    metrics: Optional[CodingMetrics] = None,
) -> bytes:
    """
    Encode ``message`` into one symbol per interpolation point.

    Parameters
    ----------
    message:
        Between 1 and 255 field elements, lowest-degree coefficient first.
    points:
        Field elements to evaluate at, at least as many as the message has
        symbols. They should be pairwise distinct or the symbols cannot be
        decoded.
    pol:
        Reduction polynomial without the x^8 term.
    metrics:
        Optional CodingMetrics collector for instrumentation.
    """
    check_polynomial(pol)
    if not message:
        raise ValueError("cannot encode an empty message")
    if len(message) > MAX_MESSAGE_LEN:
        raise ValueError(
            f"message has {len(message)} symbols, at most {MAX_MESSAGE_LEN} fit in GF(2^8)"
        )
    if len(points) > FIELD_SIZE:
        raise ValueError(f"at most {FIELD_SIZE} interpolation points, got {len(points)}")
    if len(points) < len(message):
        raise ValueError(
            f"{len(points)} interpolation points cannot carry a {len(message)}-symbol message"
        )
    _check_elements(message, "message")
    _check_elements(points, "points")

    symbols = bytes(evaluate(message, x, pol) for x in points)
    if metrics:
        metrics.record_encode(len(symbols))
    return symbols


__all__ = ["MAX_MESSAGE_LEN", "encode", "evaluate"]
