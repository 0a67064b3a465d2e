# File: rscode/coding/matrix.py

from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import SingularSystem
from .field import invert, multiply


def vandermonde_rows(points: Sequence[int], n: int, pol: int) -> List[List[int]]:
    """Rows ``[1, p, p^2, ..., p^(n-1)]`` for each point."""
    rows = []
    for point in points:
        row = [1]
        for _ in range(1, n):
            row.append(multiply(point, row[-1], pol))
        rows.append(row)
    return rows


def solve_gf256(
    matrix: Sequence[Sequence[int]], rhs: Sequence[int], pol: int
) -> Optional[List[int]]:
    """Gauss-Jordan elimination over GF(2^8) with partial pivoting.

    Returns ``None`` when the system is singular.
    """
    n = len(matrix)
    if len(rhs) != n:
        raise ValueError(f"{n} equations but {len(rhs)} right-hand values")
    if any(len(row) != n for row in matrix):
        raise ValueError("coefficient matrix must be square")
    # Augmented copy; the caller's matrix is never touched
    A = [list(row) + [value] for row, value in zip(matrix, rhs)]

    for col in range(n):
        pivot = None
        for r in range(col, n):
            if A[r][col]:
                pivot = r
                break
        if pivot is None:
            return None

        if pivot != col:
            A[col], A[pivot] = A[pivot], A[col]

        inverse = invert(A[col][col], pol)
        for r in range(n):
            if r == col or not A[r][col]:
                continue
            ratio = multiply(A[r][col], inverse, pol)
            A[r] = [x ^ multiply(ratio, y, pol) for x, y in zip(A[r], A[col])]

    # Diagonal now; divide each right-hand value by its pivot
    return [multiply(A[i][n], invert(A[i][i], pol), pol) for i in range(n)]


def solve(
    points: Sequence[int], values: Sequence[int], n: int, pol: int
) -> List[int]:
    """Recover the ``n`` coefficients of the polynomial through the first ``n`` pairs."""
    if n < 1:
        raise ValueError(f"need at least one unknown, got n={n}")
    if len(points) < n or len(values) < n:
        raise ValueError(
            f"need {n} (point, value) pairs, got {min(len(points), len(values))}"
        )
    solution = solve_gf256(vandermonde_rows(points[:n], n, pol), values[:n], pol)
    if solution is None:
        raise SingularSystem(
            "interpolation system is singular; surviving points are not distinct"
        )
    return solution
