"""
Numba-optimized kernels for square-matrix operations.

Kernels work on row-major float32 arrays. Callers convert from the
column-major storage of ``Matrix`` before calling in.
"""

from __future__ import annotations

import numpy as np
from numba import njit
from numpy.typing import NDArray

from vectorama.config import EPSILON

_EPS = np.float32(EPSILON)


@njit(cache=True, nogil=True)
def gauss_jordan_inverse_numba(
    matrix: NDArray[np.float32],
    out: NDArray[np.float32],
) -> bool:
    """
    Invert a square matrix by Gauss-Jordan elimination with partial pivoting.

    Args:
        matrix: Row-major input [M, M]
        out: Row-major output [M, M] (modified in-place)

    Returns:
        False if a pivot falls below float32 epsilon (singular), else True
    """
    n = matrix.shape[0]

    # Augmented [A | I], row-major
    extended = np.zeros((n, 2 * n), dtype=np.float32)
    for r in range(n):
        for c in range(n):
            extended[r, c] = matrix[r, c]
        extended[r, n + r] = 1.0

    for d in range(n):
        pivot = d
        for r in range(d + 1, n):
            if abs(extended[r, d]) > abs(extended[pivot, d]):
                pivot = r

        if pivot != d:
            for c in range(2 * n):
                tmp = extended[d, c]
                extended[d, c] = extended[pivot, c]
                extended[pivot, c] = tmp

        factor = extended[d, d]
        if abs(factor) < _EPS:
            return False

        for c in range(d, 2 * n):
            extended[d, c] = extended[d, c] / factor

        for r in range(n):
            if r == d:
                continue
            value = extended[r, d]
            if abs(value) < _EPS:
                continue
            for c in range(d, 2 * n):
                extended[r, c] = extended[r, c] - extended[d, c] * value

    for r in range(n):
        for c in range(n):
            out[r, c] = extended[r, n + c]

    return True


@njit(cache=True, nogil=True)
def determinant3_numba(matrix: NDArray[np.float32]) -> float:
    """
    Determinant of a row-major 3x3 matrix by cofactor expansion along row 0.

    Args:
        matrix: Row-major input [3, 3]
    """
    a = matrix
    return (
        a[0, 0] * (a[1, 1] * a[2, 2] - a[1, 2] * a[2, 1])
        - a[0, 1] * (a[1, 0] * a[2, 2] - a[1, 2] * a[2, 0])
        + a[0, 2] * (a[1, 0] * a[2, 1] - a[1, 1] * a[2, 0])
    )


@njit(cache=True, nogil=True)
def determinant4_numba(matrix: NDArray[np.float32]) -> float:
    """
    Determinant of a row-major 4x4 matrix by Laplace expansion along row 0.

    Each term uses the 3x3 minor left after deleting row 0 and the
    expanding column.

    Args:
        matrix: Row-major input [4, 4]
    """
    det = np.float32(0.0)
    minor = np.zeros((3, 3), dtype=np.float32)

    for col in range(4):
        for r in range(1, 4):
            minor_col = 0
            for c in range(4):
                if c == col:
                    continue
                minor[r - 1, minor_col] = matrix[r, c]
                minor_col += 1

        sign = np.float32(1.0) if col % 2 == 0 else np.float32(-1.0)
        det += sign * matrix[0, col] * determinant3_numba(minor)

    return det
