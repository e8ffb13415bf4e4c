"""Vec2, Vec3 and Vec4 with named component accessors.

Named properties read and write fixed indices of the single backing
array, so ``v.x`` and ``v[0]`` always agree.
"""

from __future__ import annotations

import numpy as np

from vectorama.config import DTYPE
from vectorama.types import Scalar
from vectorama.vector.vector import Vector


def _component(index: int, doc: str) -> property:
    def getter(self: Vector) -> float:
        return float(self._columns[0, index])

    def setter(self: Vector, value: Scalar) -> None:
        self._columns[0, index] = value

    return property(getter, setter, doc=doc)


class Vec2(Vector, shape=(2, 1)):
    """2D column vector."""

    __slots__ = ()

    x = _component(0, "X component")
    y = _component(1, "Y component")

    def __init__(self, x: Scalar = 0.0, y: Scalar = 0.0) -> None:
        self._columns = np.array([[x, y]], dtype=DTYPE)

    def xyz(self, z: Scalar) -> Vec3:
        return Vec3(self.x, self.y, z)


class Vec3(Vector, shape=(3, 1)):
    """3D column vector.

    Example:
        >>> Vec3(1, 0, 0).cross(Vec3(0, 1, 0))
        Vec3(0.0, 0.0, 1.0)
    """

    __slots__ = ()

    x = _component(0, "X component")
    y = _component(1, "Y component")
    z = _component(2, "Z component")

    def __init__(self, x: Scalar = 0.0, y: Scalar = 0.0, z: Scalar = 0.0) -> None:
        self._columns = np.array([[x, y, z]], dtype=DTYPE)

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def yz(self) -> Vec2:
        return Vec2(self.y, self.z)

    def xz(self) -> Vec2:
        return Vec2(self.x, self.z)

    def xyzw(self, w: Scalar) -> Vec4:
        return Vec4(self.x, self.y, self.z, w)


class Vec4(Vector, shape=(4, 1)):
    """4D column vector, typically a homogeneous point or direction."""

    __slots__ = ()

    x = _component(0, "X component")
    y = _component(1, "Y component")
    z = _component(2, "Z component")
    w = _component(3, "W component")

    def __init__(
        self, x: Scalar = 0.0, y: Scalar = 0.0, z: Scalar = 0.0, w: Scalar = 0.0
    ) -> None:
        self._columns = np.array([[x, y, z, w]], dtype=DTYPE)

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def xz(self) -> Vec2:
        return Vec2(self.x, self.z)

    def xw(self) -> Vec2:
        return Vec2(self.x, self.w)

    def yz(self) -> Vec2:
        return Vec2(self.y, self.z)

    def yw(self) -> Vec2:
        return Vec2(self.y, self.w)

    def zw(self) -> Vec2:
        return Vec2(self.z, self.w)

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def xyw(self) -> Vec3:
        return Vec3(self.x, self.y, self.w)

    def xzw(self) -> Vec3:
        return Vec3(self.x, self.z, self.w)

    def yzw(self) -> Vec3:
        return Vec3(self.y, self.z, self.w)
