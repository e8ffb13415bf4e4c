"""
Homogeneous (M+1)x(M+1) matrix helpers for translations and scales.

Works for any dimension M: a translation vector lives in the last column
of an identity matrix, a scale vector on its diagonal.
"""

from __future__ import annotations

import numpy as np

from vectorama.config import DTYPE
from vectorama.matrix import Matrix
from vectorama.types import ArrayLike
from vectorama.vector import Vector

# ============================================================================
# Translation
# ============================================================================


def _components(vector: Vector | ArrayLike) -> np.ndarray:
    data = np.asarray(vector, dtype=DTYPE).reshape(-1)
    if data.size == 0:
        raise ValueError("Homogeneous helpers need at least one component")
    return data


def _require_homogeneous(matrix: Matrix, size: int | None) -> int:
    rows, cols = matrix.shape
    if rows != cols or rows < 2:
        raise ValueError(f"Expected a square homogeneous matrix, got Matrix<{rows}, {cols}>")
    if size is not None and rows != size + 1:
        raise ValueError(f"Matrix size must be {size + 1} for a {size}D vector, got {rows}")
    return rows - 1


def translation_to_homogeneous(vector: Vector | ArrayLike) -> Matrix:
    """Identity matrix with ``vector`` in the last column.

    :param vector: M translation components
    :returns: (M+1)x(M+1) matrix
    """
    data = _components(vector)
    size = data.size
    matrix = Matrix.identity(size + 1)
    for m in range(size):
        matrix[m, size] = data[m]
    return matrix


def translation_from_homogeneous(matrix: Matrix, size: int | None = None) -> Vector:
    """Read the translation column back out.

    :param matrix: Square (M+1)x(M+1) matrix
    :param size: Expected M, checked when given
    :raises ValueError: If the matrix is not square or does not match ``size``
    """
    size = _require_homogeneous(matrix, size)
    return Vector.from_components([matrix[m, size] for m in range(size)])


# ============================================================================
# Scale
# ============================================================================


def scale_to_homogeneous(vector: Vector | ArrayLike) -> Matrix:
    """Identity matrix with ``vector`` on the first M diagonal entries."""
    data = _components(vector)
    size = data.size
    matrix = Matrix.identity(size + 1)
    for m in range(size):
        matrix[m, m] = data[m]
    return matrix


def scale_from_homogeneous(matrix: Matrix, size: int | None = None) -> Vector:
    """Per-axis scale as the column lengths of the upper-left MxM block.

    Column lengths are unaffected by any rotation mixed into the block,
    so this also recovers the scale of a rotate-then-scale matrix. Signs
    (reflections) are not recovered.
    """
    size = _require_homogeneous(matrix, size)
    block = matrix.view(size, size)
    return Vector.from_components(
        [block.column(m).magnitude() for m in range(size)]
    )


def scale_components(vector: Vector | ArrayLike, scale: Vector | ArrayLike) -> Vector:
    """Component-wise product of two equal-length vectors."""
    a = _components(vector)
    b = _components(scale)
    if a.size != b.size:
        raise ValueError(f"Cannot scale Vector<{a.size}> by Vector<{b.size}>")
    return Vector.from_components(a * b)
