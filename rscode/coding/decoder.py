"""
Reed-Solomon erasure decoder using Gaussian elimination over GF(2^8).
Drops erased positions and interpolates the message polynomial from the
survivors.
"""

from __future__ import annotations

import operator
from time import perf_counter
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from ..shared.metrics import CodingMetrics
from .encoder import MAX_MESSAGE_LEN, _check_elements
from .errors import InsufficientSymbols, InvalidErasures, SingularSystem
from .field import FIELD_SIZE, check_polynomial
from .matrix import solve


def _validate_erasures(erased_positions: Iterable[int], length: int) -> Set[int]:
    """Return the erasure set, rejecting duplicates and out-of-range positions."""
    erased: Set[int] = set()
    for pos in erased_positions:
        if isinstance(pos, bool):
            raise InvalidErasures(f"erasure position {pos!r} is not an integer")
        try:
            pos = operator.index(pos)
        except TypeError:
            raise InvalidErasures(f"erasure position {pos!r} is not an integer") from None
        if not 0 <= pos < length:
            raise InvalidErasures(
                f"erasure position {pos} outside the {length}-symbol codeword"
            )
        if pos in erased:
            raise InvalidErasures(f"erasure position {pos} listed twice")
        erased.add(pos)
    return erased


def _surviving_pairs(
    symbols: Sequence[int], points: Sequence[int], erased: Set[int]
) -> Tuple[List[int], List[int]]:
    """Split the non-erased positions into (points, values), keeping order."""
    kept_points = []
    kept_values = []
    for i, (point, value) in enumerate(zip(points, symbols)):
        if i in erased:
            continue
        kept_points.append(point)
        kept_values.append(value)
    return kept_points, kept_values


def decode(
    symbols: Sequence[int],
    message_len: int,
    points: Sequence[int],
    pol: int,
    erased_positions: Iterable[int] = (),
    *,
    metrics: Optional[CodingMetrics] = None,
) -> bytes:
    """
    Reconstruct a ``message_len``-symbol message from encoded symbols.

    Parameters
    ----------
    symbols:
        The received codeword, one symbol per interpolation point. Values at
        erased positions are ignored.
    message_len:
        Number of symbols in the original message.
    points:
        The interpolation points used by the encoder.
    pol:
        Reduction polynomial without the x^8 term.
    erased_positions:
        Indices into ``symbols`` known to be missing or corrupted.
    metrics:
        Optional CodingMetrics collector for instrumentation.

    Raises ``InsufficientSymbols`` when fewer than ``message_len`` symbols
    survive, ``SingularSystem`` when the surviving points do not determine
    the message, and ``InvalidErasures`` for malformed erasure positions.
    """
    check_polynomial(pol)
    if len(symbols) != len(points):
        raise ValueError(
            f"{len(symbols)} symbols but {len(points)} interpolation points"
        )
    if isinstance(message_len, bool) or not isinstance(message_len, int):
        raise ValueError(f"message_len must be an integer, got {message_len!r}")
    if not 1 <= message_len <= MAX_MESSAGE_LEN:
        raise ValueError(f"message_len must be in [1, {MAX_MESSAGE_LEN}], got {message_len}")
    if len(points) > FIELD_SIZE:
        raise ValueError(f"at most {FIELD_SIZE} interpolation points, got {len(points)}")
    _check_elements(symbols, "symbols")
    _check_elements(points, "points")

    erased = _validate_erasures(erased_positions, len(symbols))
    if metrics:
        metrics.record_erasures(len(erased))

    start = perf_counter()
    kept_points, kept_values = _surviving_pairs(symbols, points, erased)
    available = len(kept_values)
    if available < message_len:
        if metrics:
            metrics.record_failure("insufficient_symbols")
            metrics.record_decode(perf_counter() - start, False, 0, available)
        raise InsufficientSymbols(available, message_len)

    try:
        coefficients = solve(kept_points, kept_values, message_len, pol)
    except SingularSystem:
        if metrics:
            metrics.record_failure("singular_system")
            metrics.record_decode(perf_counter() - start, False, message_len, available)
        raise

    message = bytes(coefficients)
    if metrics:
        metrics.record_decode(perf_counter() - start, True, message_len, available)
    return message


__all__ = ["decode"]
