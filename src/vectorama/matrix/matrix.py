"""Column-major fixed-shape matrix storage and arithmetic.

Storage mirrors the OpenGL/glTF layout: the backing float32 array is
indexed ``[column, row]`` so that flattening it yields consecutive
columns. Shape is fixed at construction and checked at runtime.

Shaped subclasses register themselves by ``(rows, cols)`` so every
operation returns the canonical class for its result shape: a 3x3
product is a ``Mat3`` and a 3x1 product is a ``Vec3``.
"""

from __future__ import annotations

import numbers
from typing import ClassVar, Self

import numpy as np
from numpy.typing import NDArray

from vectorama.config import DEFAULT_COMPARE_EPSILON, DTYPE
from vectorama.matrix.square import SquareMatrixOps
from vectorama.types import ArrayLike, NestedArrayLike, Scalar

# (rows, cols) -> registered shaped subclass
_SHAPED_CLASSES: dict[tuple[int, int], type[Matrix]] = {}
_column_vector_class: type[Matrix] | None = None


def _class_for(rows: int, cols: int) -> type[Matrix]:
    """Return the canonical class for a result of the given shape."""
    shaped = _SHAPED_CLASSES.get((rows, cols))
    if shaped is not None:
        return shaped
    if cols == 1 and _column_vector_class is not None:
        return _column_vector_class
    return Matrix


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Matrix(SquareMatrixOps):
    """Dense ``rows x cols`` float32 matrix stored column-major.

    Example:
        >>> m = Matrix.from_rows([[1, 2], [3, 4]])
        >>> m[0, 1]
        2.0
        >>> (m @ Matrix.identity(2)) == m
        True
    """

    __slots__ = ("_columns",)

    # numpy operands defer to the reflected operators instead of coercing
    __array_ufunc__ = None

    _fixed_shape: ClassVar[tuple[int, int] | None] = None

    _columns: NDArray[np.float32]

    def __init_subclass__(
        cls,
        shape: tuple[int, int] | None = None,
        column_vector: bool = False,
        **kwargs,
    ) -> None:
        super().__init_subclass__(**kwargs)
        global _column_vector_class
        if shape is not None:
            cls._fixed_shape = shape
            _SHAPED_CLASSES[shape] = cls
        if column_vector:
            _column_vector_class = cls

    def __init__(self, columns: NestedArrayLike | None = None) -> None:
        """Create a matrix from a nested sequence of columns.

        :param columns: ``cols`` sequences of ``rows`` values each. Shaped
            square classes default to the identity when omitted.
        :raises ValueError: If the data is not 2D or mismatches a fixed shape
        """
        fixed = self._fixed_shape
        if columns is None:
            if fixed is None:
                raise TypeError(
                    f"{type(self).__name__} needs explicit columns; "
                    "use zeros(rows, cols) or from_flattened() instead"
                )
            rows, cols = fixed
            data = np.eye(rows, dtype=DTYPE) if rows == cols else np.zeros((cols, rows), DTYPE)
        else:
            data = np.array(columns, dtype=DTYPE)
            if data.ndim != 2 or data.size == 0:
                raise ValueError(
                    f"Expected a non-empty 2D sequence of columns, got shape {data.shape}"
                )
            if fixed is not None and data.shape != (fixed[1], fixed[0]):
                raise ValueError(
                    f"{type(self).__name__} expects {fixed[1]} columns of {fixed[0]} values, "
                    f"got {data.shape[0]} columns of {data.shape[1]}"
                )
        self._columns = np.ascontiguousarray(data)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def _from_array(cls, columns: NDArray[np.float32]) -> Self:
        """Wrap a ``[cols, rows]`` float32 array without copying or checks."""
        obj = object.__new__(cls)
        obj._columns = columns
        return obj

    def _wrap(self, columns: NDArray) -> Matrix:
        cols, rows = columns.shape
        data = np.ascontiguousarray(columns, dtype=DTYPE)
        return _class_for(rows, cols)._from_array(data)

    @classmethod
    def _resolve_shape(cls, rows: int | None, cols: int | None) -> tuple[int, int]:
        fixed = cls._fixed_shape
        if fixed is not None:
            if (rows is not None and rows != fixed[0]) or (cols is not None and cols != fixed[1]):
                raise ValueError(
                    f"{cls.__name__} is fixed at {fixed[0]}x{fixed[1]}, got {rows}x{cols}"
                )
            return fixed
        if rows is None or cols is None:
            raise TypeError(f"{cls.__name__} requires both rows and cols")
        if rows < 1 or cols < 1:
            raise ValueError(f"Matrix dimensions must be positive, got {rows}x{cols}")
        return rows, cols

    @classmethod
    def zeros(cls, rows: int | None = None, cols: int | None = None) -> Matrix:
        """Create a matrix filled with zeros."""
        rows, cols = cls._resolve_shape(rows, cols)
        return _class_for(rows, cols)._from_array(np.zeros((cols, rows), dtype=DTYPE))

    @classmethod
    def ones(cls, rows: int | None = None, cols: int | None = None) -> Matrix:
        """Create a matrix filled with ones."""
        rows, cols = cls._resolve_shape(rows, cols)
        return _class_for(rows, cols)._from_array(np.ones((cols, rows), dtype=DTYPE))

    @classmethod
    def from_columns(cls, columns: NestedArrayLike) -> Matrix:
        """Create a matrix from a sequence of columns.

        :param columns: ``cols`` sequences of ``rows`` values each
        :returns: Matrix of the canonical class for its shape
        """
        data = np.array(columns, dtype=DTYPE)
        if data.ndim != 2 or data.size == 0:
            raise ValueError(f"Expected a non-empty 2D sequence of columns, got shape {data.shape}")
        cols, rows = data.shape
        if cls._fixed_shape is not None:
            cls._resolve_shape(rows, cols)
        return _class_for(rows, cols)._from_array(np.ascontiguousarray(data))

    @classmethod
    def from_rows(cls, rows: NestedArrayLike) -> Matrix:
        """Create a matrix from a sequence of rows (as written on paper)."""
        data = np.array(rows, dtype=DTYPE)
        if data.ndim != 2 or data.size == 0:
            raise ValueError(f"Expected a non-empty 2D sequence of rows, got shape {data.shape}")
        return cls.from_columns(data.T)

    @classmethod
    def from_flattened(
        cls, data: ArrayLike, rows: int | None = None, cols: int | None = None
    ) -> Matrix:
        """Parse a column-major flat buffer.

        :param data: ``rows * cols`` values, column after column
        :param rows: Row count (implied by shaped classes)
        :param cols: Column count (implied by shaped classes)
        :raises ValueError: If the buffer length is not ``rows * cols``
        """
        rows, cols = cls._resolve_shape(rows, cols)
        flat = np.asarray(data, dtype=DTYPE).reshape(-1)
        if flat.size != rows * cols:
            raise ValueError(f"Invalid buffer size ({flat.size}) for Matrix<{rows}, {cols}>")
        return _class_for(rows, cols)._from_array(flat.reshape(cols, rows).copy())

    def copy(self) -> Self:
        return type(self)._from_array(self._columns.copy())

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._columns.shape[1]

    @property
    def cols(self) -> int:
        return self._columns.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)"""
        return self._columns.shape[1], self._columns.shape[0]

    def _check_index(self, index: object) -> tuple[int, int]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError(f"Matrix index must be a (row, col) pair, got {index!r}")
        row, col = index
        rows, cols = self.shape
        if not 0 <= row < rows or not 0 <= col < cols:
            raise IndexError(f"Index ({row}, {col}) out of range for Matrix<{rows}, {cols}>")
        return row, col

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = self._check_index(index)
        return float(self._columns[col, row])

    def __setitem__(self, index: tuple[int, int], value: Scalar) -> None:
        row, col = self._check_index(index)
        self._columns[col, row] = value

    def column(self, index: int) -> tuple[float, ...]:
        """Return a copy of one column.

        :raises IndexError: If ``index`` is not a valid column
        """
        if not 0 <= index < self.cols:
            raise IndexError(f"Column {index} out of range for Matrix<{self.rows}, {self.cols}>")
        return tuple(float(v) for v in self._columns[index])

    def view(self, rows: int, cols: int, start_row: int = 0, start_col: int = 0) -> Matrix:
        """Extract a ``rows x cols`` sub-matrix starting at (start_row, start_col).

        :raises ValueError: If the window exceeds the matrix bounds
        """
        if (
            rows < 1
            or cols < 1
            or start_row < 0
            or start_col < 0
            or start_row + rows > self.rows
            or start_col + cols > self.cols
        ):
            raise ValueError(
                f"View {rows}x{cols} at ({start_row}, {start_col}) exceeds "
                f"dimensions of Matrix<{self.rows}, {self.cols}>"
            )
        window = self._columns[start_col : start_col + cols, start_row : start_row + rows]
        return self._wrap(window.copy())

    def transpose(self) -> Matrix:
        """Return the ``cols x rows`` transpose."""
        return self._wrap(self._columns.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    # ------------------------------------------------------------------
    # Buffer interop
    # ------------------------------------------------------------------

    def as_flattened(self) -> NDArray[np.float32]:
        """Read-only column-major view of the storage (length rows * cols)."""
        flat = self._columns.reshape(-1)
        flat.flags.writeable = False
        return flat

    def to_numpy(self) -> NDArray[np.float32]:
        """Copy out as a ``[rows, cols]`` array indexed ``[row, col]``."""
        return self._columns.T.copy()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        array = self._columns.T
        if copy is False:
            if dtype is not None and np.dtype(dtype) != array.dtype:
                raise ValueError(f"Cannot convert {type(self).__name__} to {dtype} without a copy")
            return array
        return array.astype(array.dtype if dtype is None else dtype, copy=True)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._columns, other._columns))

    __hash__ = None  # type: ignore[assignment]

    def is_close(self, other: Matrix, epsilon: float = DEFAULT_COMPARE_EPSILON) -> bool:
        """Compare shape and every entry within an absolute tolerance."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._columns, other._columns, rtol=0.0, atol=epsilon))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _check_same_shape(self, other: Matrix, op: str) -> None:
        if self.shape != other.shape:
            raise ValueError(
                f"Cannot {op} Matrix<{other.rows}, {other.cols}> "
                f"and Matrix<{self.rows}, {self.cols}>"
            )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "add")
        return self._wrap(self._columns + other._columns)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "subtract")
        return self._wrap(self._columns - other._columns)

    def __neg__(self) -> Matrix:
        return self._wrap(-self._columns)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(
                f"Cannot multiply Matrix<{self.rows}, {self.cols}> "
                f"by Matrix<{other.rows}, {other.cols}>"
            )
        # [cols, rows] storage: (A @ B)^T == B^T @ A^T
        return self._wrap(other._columns @ self._columns)

    def __mul__(self, other: Matrix | Scalar) -> Matrix:
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        if not _is_scalar(other):
            return NotImplemented
        return self._wrap(self._columns * DTYPE(other))

    def __rmul__(self, other: Scalar) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self._wrap(DTYPE(other) * self._columns)

    def __truediv__(self, other: Scalar) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self._wrap(self._columns / DTYPE(other))

    def __iadd__(self, other: Matrix) -> Self:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "add")
        self._columns += other._columns
        return self

    def __isub__(self, other: Matrix) -> Self:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "subtract")
        self._columns -= other._columns
        return self

    def __imul__(self, other: Scalar) -> Self:
        if not _is_scalar(other):
            return NotImplemented
        self._columns *= DTYPE(other)
        return self

    def __itruediv__(self, other: Scalar) -> Self:
        if not _is_scalar(other):
            return NotImplemented
        self._columns /= DTYPE(other)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_rows({self.to_numpy().tolist()})"


class Mat2(Matrix, shape=(2, 2)):
    """2x2 column-major matrix."""

    __slots__ = ()


class Mat3(Matrix, shape=(3, 3)):
    """3x3 column-major matrix, matching OpenGL and glTF conventions."""

    __slots__ = ()


class Mat4(Matrix, shape=(4, 4)):
    """4x4 column-major matrix, matching OpenGL and glTF conventions."""

    __slots__ = ()
