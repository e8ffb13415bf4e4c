"""Scale2 and Scale3: per-axis scale factors over Vec2/Vec3."""

from __future__ import annotations

from typing import ClassVar

from vectorama.matrix import Matrix
from vectorama.matrix.matrix import _is_scalar
from vectorama.transform.homogeneous import (
    scale_components,
    scale_from_homogeneous,
    scale_to_homogeneous,
)
from vectorama.types import ArrayLike, Scalar
from vectorama.vector import Vec2, Vec3, Vector


class _Scale:
    __slots__ = ("_vector",)

    _vector_cls: ClassVar[type[Vector]]

    _vector: Vector

    @classmethod
    def new(cls, components: Vector | ArrayLike):
        obj = object.__new__(cls)
        obj._vector = cls._vector_cls.from_components(components)
        return obj

    @classmethod
    def from_homogeneous_matrix(cls, matrix: Matrix):
        """Recover scale factors as the column lengths of the linear block."""
        size = cls._vector_cls._fixed_shape[0]
        return cls.new(scale_from_homogeneous(matrix, size))

    @property
    def vector(self) -> Vector:
        """Copy of the scale factors."""
        return self._vector.copy()

    def homogeneous_matrix(self) -> Matrix:
        return scale_to_homogeneous(self._vector)

    def scale(self, vector: Vector | ArrayLike) -> Vector:
        """Component-wise product with the scale factors."""
        return scale_components(self._vector_cls.from_components(vector), self._vector)

    def __mul__(self, other: Vector | Scalar):
        """``s * v`` scales a vector; ``s * k`` scales every factor by ``k``."""
        if isinstance(other, Vector):
            return self.scale(other)
        if _is_scalar(other):
            return type(self).new(self._vector * other)
        return NotImplemented

    def __imul__(self, other: Scalar):
        if not _is_scalar(other):
            return NotImplemented
        self._vector *= other
        return self

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._vector == other._vector

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self._vector)
        return f"{type(self).__name__}({values})"


class Scale2(_Scale):
    """2D scale; defaults to (1, 1)."""

    __slots__ = ()

    _vector_cls = Vec2

    def __init__(self, x: float = 1.0, y: float = 1.0) -> None:
        self._vector = Vec2(x, y)

    @property
    def x(self) -> float:
        return self._vector.x

    @property
    def y(self) -> float:
        return self._vector.y


class Scale3(_Scale):
    """3D scale; defaults to (1, 1, 1).

    Example:
        >>> Scale3(2, 3, 4) * Vec3(1, 1, 1)
        Vec3(2.0, 3.0, 4.0)
        >>> Scale3.from_homogeneous_matrix(Scale3(2, 3, 4).homogeneous_matrix())
        Scale3(2.0, 3.0, 4.0)
    """

    __slots__ = ()

    _vector_cls = Vec3

    def __init__(self, x: float = 1.0, y: float = 1.0, z: float = 1.0) -> None:
        self._vector = Vec3(x, y, z)

    @property
    def x(self) -> float:
        return self._vector.x

    @property
    def y(self) -> float:
        return self._vector.y

    @property
    def z(self) -> float:
        return self._vector.z
