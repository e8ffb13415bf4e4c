"""Translation2 and Translation3: offset wrappers over Vec2/Vec3."""

from __future__ import annotations

from typing import ClassVar

from vectorama.matrix import Matrix
from vectorama.transform.homogeneous import (
    translation_from_homogeneous,
    translation_to_homogeneous,
)
from vectorama.types import ArrayLike
from vectorama.vector import Vec2, Vec3, Vector


class _Translation:
    """Shared behaviour; subclasses pin the vector class."""

    __slots__ = ("_vector",)

    _vector_cls: ClassVar[type[Vector]]

    _vector: Vector

    @classmethod
    def new(cls, components: Vector | ArrayLike):
        """Build from a vector or a sequence of components."""
        obj = object.__new__(cls)
        obj._vector = cls._vector_cls.from_components(components)
        return obj

    @classmethod
    def from_homogeneous_matrix(cls, matrix: Matrix):
        """Extract the translation column of an (M+1)x(M+1) matrix."""
        size = cls._vector_cls._fixed_shape[0]
        return cls.new(translation_from_homogeneous(matrix, size))

    @property
    def vector(self) -> Vector:
        """Copy of the offset."""
        return self._vector.copy()

    def homogeneous_matrix(self) -> Matrix:
        return translation_to_homogeneous(self._vector)

    def translate(self, vector: Vector | ArrayLike) -> Vector:
        """Return ``vector + offset``."""
        return self._vector_cls.from_components(vector) + self._vector

    def __mul__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.translate(other)

    def __iadd__(self, other: Vector):
        if not isinstance(other, Vector):
            return NotImplemented
        self._vector += other
        return self

    def __isub__(self, other: Vector):
        if not isinstance(other, Vector):
            return NotImplemented
        self._vector -= other
        return self

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._vector == other._vector

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self._vector)
        return f"{type(self).__name__}({values})"


class Translation2(_Translation):
    """2D translation; ``homogeneous_matrix()`` is a ``Mat3``.

    Example:
        >>> t = Translation2(1, 2)
        >>> t * Vec2(3, 4)
        Vec2(4.0, 6.0)
    """

    __slots__ = ()

    _vector_cls = Vec2

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self._vector = Vec2(x, y)

    @property
    def x(self) -> float:
        return self._vector.x

    @property
    def y(self) -> float:
        return self._vector.y


class Translation3(_Translation):
    """3D translation; ``homogeneous_matrix()`` is a ``Mat4``."""

    __slots__ = ()

    _vector_cls = Vec3

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
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
