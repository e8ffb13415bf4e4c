"""General (not necessarily unit) quaternions.

Quaternion Convention: vector part (x, y, z) plus scalar part w. Array
forms are scalar-last: ``[x, y, z, w]``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from vectorama.config import DEFAULT_COMPARE_EPSILON, DTYPE, EPSILON
from vectorama.matrix.matrix import _is_scalar
from vectorama.types import ArrayLike, Scalar
from vectorama.vector import Vec3

logger = logging.getLogger(__name__)


@dataclass
class Quaternion:
    """Quaternion with a ``Vec3`` imaginary part and a float real part.

    No magnitude invariant is enforced; see ``UnitQuaternion`` for rotations.

    Example:
        >>> qy = Quaternion.from_y_axis(math.pi / 2)
        >>> qx = Quaternion.from_x_axis(math.pi / 2)
        >>> (qy * qx).to_array()  # approximately (0.5, 0.5, -0.5, 0.5)
    """

    vector: Vec3
    scalar: float

    def __post_init__(self) -> None:
        self.vector = Vec3.from_components(self.vector)
        self.scalar = float(DTYPE(self.scalar))

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(Vec3(0.0, 0.0, 0.0), 1.0)

    @classmethod
    def from_vector(cls, vector: Vec3 | ArrayLike) -> Quaternion:
        """Pure quaternion (scalar 0) used to rotate a vector."""
        return cls(Vec3.from_components(vector), 0.0)

    @classmethod
    def from_array(cls, values: ArrayLike) -> Quaternion:
        """Build from ``[x, y, z, w]``.

        :raises ValueError: If ``values`` does not hold four numbers
        """
        values = [float(v) for v in values]
        if len(values) != 4:
            raise ValueError(f"Quaternion array must have length 4, got {len(values)}")
        return cls(Vec3(values[0], values[1], values[2]), values[3])

    def to_array(self) -> tuple[float, float, float, float]:
        """Return ``(x, y, z, w)``."""
        return (self.vector.x, self.vector.y, self.vector.z, self.scalar)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def conjugate(self) -> Quaternion:
        return Quaternion(-self.vector, self.scalar)

    def magnitude(self) -> float:
        return math.sqrt(self.vector.dot(self.vector) + self.scalar * self.scalar)

    def inverse(self) -> Quaternion:
        """Conjugate divided by the squared magnitude.

        :returns: Identity when the squared magnitude is below epsilon
        """
        mag_sq = self.magnitude() ** 2
        if abs(mag_sq) < EPSILON:
            logger.debug("inverse: degenerate quaternion %s, returning identity", self)
            return Quaternion.identity()
        return Quaternion(-self.vector / mag_sq, self.scalar / mag_sq)

    def normalize(self) -> Quaternion:
        """Scale to unit magnitude.

        :returns: Identity when the magnitude is at or below epsilon
        """
        mag = self.magnitude()
        if mag <= EPSILON:
            logger.debug("normalize: zero-length quaternion, returning identity")
            return Quaternion.identity()
        return self / mag

    def dot(self, other: Quaternion) -> float:
        return self.vector.dot(other.vector) + self.scalar * other.scalar

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product (not commutative)."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        vector = (
            self.vector.cross(other.vector)
            + other.vector * self.scalar
            + self.vector * other.scalar
        )
        scalar = self.scalar * other.scalar - self.vector.dot(other.vector)
        return Quaternion(vector, scalar)

    def __truediv__(self, other: Scalar) -> Quaternion:
        if not _is_scalar(other):
            return NotImplemented
        return Quaternion(self.vector / other, self.scalar / other)

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.vector, -self.scalar)

    def is_close(self, other: Quaternion, epsilon: float = DEFAULT_COMPARE_EPSILON) -> bool:
        """Component-wise comparison; q and -q are NOT considered close."""
        return (
            self.vector.is_close(other.vector, epsilon)
            and abs(self.scalar - other.scalar) <= epsilon
        )

    # ------------------------------------------------------------------
    # Rotation constructors (half-angle form)
    # ------------------------------------------------------------------

    @classmethod
    def from_axis_angle(cls, axis: Vec3 | ArrayLike, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about ``axis`` (normalized here)."""
        half_angle = angle / 2.0
        axis = Vec3.from_components(axis).normalize()
        return cls(axis * math.sin(half_angle), math.cos(half_angle))

    @classmethod
    def from_x_axis(cls, angle: float) -> Quaternion:
        return cls.from_axis_angle(Vec3(1.0, 0.0, 0.0), angle)

    @classmethod
    def from_y_axis(cls, angle: float) -> Quaternion:
        return cls.from_axis_angle(Vec3(0.0, 1.0, 0.0), angle)

    @classmethod
    def from_z_axis(cls, angle: float) -> Quaternion:
        return cls.from_axis_angle(Vec3(0.0, 0.0, 1.0), angle)

    @classmethod
    def from_euler_angles(cls, x: float, y: float, z: float) -> Quaternion:
        """Compose intrinsic rotations in Y, X, Z order (glTF yaw-pitch-roll).

        :param x: Rotation about X (pitch) in radians
        :param y: Rotation about Y (yaw) in radians
        :param z: Rotation about Z (roll) in radians
        """
        qx = cls.from_x_axis(x)
        qy = cls.from_y_axis(y)
        qz = cls.from_z_axis(z)
        return qy * qx * qz
