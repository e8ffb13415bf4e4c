"""Column vectors: the ``M x 1`` specialization of ``Matrix``."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import numpy as np

from vectorama.config import DTYPE, EPSILON
from vectorama.matrix.matrix import Matrix, _class_for
from vectorama.types import ArrayLike, Scalar

logger = logging.getLogger(__name__)


class Vector(Matrix, column_vector=True):
    """A column vector of float32 values with ``M`` rows.

    Indexing takes a single component index; ``(row, 0)`` pairs work too.

    Example:
        >>> v = Vector([1.0, 2.0, 3.0])
        >>> v.dot(v)
        14.0
    """

    __slots__ = ()

    def __init__(self, components: ArrayLike) -> None:
        data = np.array(components, dtype=DTYPE).reshape(1, -1)
        if data.size == 0:
            raise ValueError("Vector needs at least one component")
        fixed = self._fixed_shape
        if fixed is not None and data.shape[1] != fixed[0]:
            raise ValueError(
                f"{type(self).__name__} expects {fixed[0]} components, got {data.shape[1]}"
            )
        self._columns = np.ascontiguousarray(data)

    @classmethod
    def _resolve_shape(cls, rows: int | None, cols: int | None) -> tuple[int, int]:
        if cols not in (None, 1):
            raise ValueError(f"{cls.__name__} has exactly one column, got {cols}")
        return super()._resolve_shape(rows, 1)

    @classmethod
    def from_components(cls, components: ArrayLike) -> Vector:
        """Build the canonical vector class for ``len(components)``.

        :raises ValueError: If called on a sized class with the wrong count
        """
        data = np.array(components, dtype=DTYPE).reshape(1, -1)
        size = data.shape[1]
        if size == 0:
            raise ValueError("Vector needs at least one component")
        if cls._fixed_shape is not None and cls._fixed_shape[0] != size:
            raise ValueError(f"{cls.__name__} expects {cls._fixed_shape[0]} components, got {size}")
        return _class_for(size, 1)._from_array(np.ascontiguousarray(data))

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------

    def _component_index(self, index: int) -> int:
        size = self.rows
        if not 0 <= index < size:
            raise IndexError(f"Component {index} out of range for Vector<{size}>")
        return index

    def __getitem__(self, index: int | tuple[int, int]) -> float:
        if isinstance(index, tuple):
            return super().__getitem__(index)
        return float(self._columns[0, self._component_index(index)])

    def __setitem__(self, index: int | tuple[int, int], value: Scalar) -> None:
        if isinstance(index, tuple):
            super().__setitem__(index, value)
            return
        self._columns[0, self._component_index(index)] = value

    def __len__(self) -> int:
        return self.rows

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._columns[0])

    def to_tuple(self) -> tuple[float, ...]:
        return self.column(0)

    # ------------------------------------------------------------------
    # Vector algebra
    # ------------------------------------------------------------------

    def dot(self, other: Vector) -> float:
        """Sum of component-wise products."""
        if self.rows != other.rows:
            raise ValueError(f"Cannot dot Vector<{self.rows}> with Vector<{other.rows}>")
        return float(np.dot(self._columns[0], other._columns[0]))

    def magnitude(self) -> float:
        return float(np.sqrt(np.dot(self._columns[0], self._columns[0])))

    def normalize(self) -> Vector:
        """Unit vector in the same direction.

        :returns: Zero vector when the magnitude is at or below epsilon
        """
        mag = self.magnitude()
        if mag <= EPSILON:
            logger.debug("normalize: zero-length Vector<%d>, returning zeros", self.rows)
            return self._wrap(np.zeros_like(self._columns))
        return self / mag

    def cross(self, other: Vector) -> float | Vector:
        """2D perp-dot (a float) or 3D cross product (a vector).

        :raises ValueError: For any other dimension or mismatched sizes
        """
        if self.rows != other.rows:
            raise ValueError(f"Cannot cross Vector<{self.rows}> with Vector<{other.rows}>")
        a = self._columns[0]
        b = other._columns[0]
        if self.rows == 2:
            return float(a[0] * b[1] - a[1] * b[0])
        if self.rows == 3:
            result = np.array(
                [
                    [
                        a[1] * b[2] - a[2] * b[1],
                        a[2] * b[0] - a[0] * b[2],
                        a[0] * b[1] - a[1] * b[0],
                    ]
                ],
                dtype=DTYPE,
            )
            return self._wrap(result)
        raise ValueError(f"cross is only defined for 2D and 3D vectors, got Vector<{self.rows}>")

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self)
        if self._fixed_shape is None:
            return f"Vector([{values}])"
        return f"{type(self).__name__}({values})"
