"""Unit quaternions representing 3D rotations.

Every constructor normalizes, and the wrapped value is never edited in
place, so the unit-length invariant holds for the lifetime of a value.

Euler convention: angles are (x, y, z) in radians, composed as intrinsic
Y, then X, then Z. ``to_euler_angles`` returns them in the same order.
"""

from __future__ import annotations

import logging
import math
from typing import overload

from vectorama.config import DEFAULT_COMPARE_EPSILON, EPSILON, SLERP_DOT_THRESHOLD
from vectorama.matrix import Mat3, Mat4, Matrix
from vectorama.quaternion.quaternion import Quaternion
from vectorama.types import ArrayLike
from vectorama.vector import Vec3

logger = logging.getLogger(__name__)


class UnitQuaternion:
    """Rotation stored as a normalized ``Quaternion``.

    Example:
        >>> q = UnitQuaternion.from_z_axis(math.pi)
        >>> q.rotate_vector(Vec3(1, 2, 0))  # approximately Vec3(-1, -2, 0)
        >>> q.homogeneous_matrix()  # 4x4 rotation
    """

    __slots__ = ("_quat",)

    def __init__(self, quaternion: Quaternion | None = None) -> None:
        """Wrap a quaternion, normalizing it.

        :param quaternion: Any quaternion; identity when omitted
        """
        if quaternion is None:
            self._quat = Quaternion.identity()
        else:
            self._quat = quaternion.normalize()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def _from_normalized(cls, quaternion: Quaternion) -> UnitQuaternion:
        obj = object.__new__(cls)
        obj._quat = quaternion
        return obj

    @classmethod
    def new_normalized(cls, vector: Vec3 | ArrayLike, scalar: float) -> UnitQuaternion:
        return cls(Quaternion(Vec3.from_components(vector), scalar))

    @classmethod
    def from_quaternion(cls, quaternion: Quaternion) -> UnitQuaternion:
        return cls(quaternion)

    @classmethod
    def from_array(cls, values: ArrayLike) -> UnitQuaternion:
        """Build from ``[x, y, z, w]``, normalizing."""
        return cls(Quaternion.from_array(values))

    @classmethod
    def identity(cls) -> UnitQuaternion:
        return cls._from_normalized(Quaternion.identity())

    @classmethod
    def from_x_axis(cls, angle: float) -> UnitQuaternion:
        return cls(Quaternion.from_x_axis(angle))

    @classmethod
    def from_y_axis(cls, angle: float) -> UnitQuaternion:
        return cls(Quaternion.from_y_axis(angle))

    @classmethod
    def from_z_axis(cls, angle: float) -> UnitQuaternion:
        return cls(Quaternion.from_z_axis(angle))

    @classmethod
    def from_axis_angle(cls, axis: Vec3 | ArrayLike, angle: float) -> UnitQuaternion:
        return cls(Quaternion.from_axis_angle(axis, angle))

    @classmethod
    def from_euler_angles(cls, x: float, y: float, z: float) -> UnitQuaternion:
        """Intrinsic Y-X-Z rotation; see ``Quaternion.from_euler_angles``."""
        return cls(Quaternion.from_euler_angles(x, y, z))

    @classmethod
    def from_rotation_matrix(cls, matrix: Matrix) -> UnitQuaternion:
        """Convert an orthonormal rotation matrix.

        Uses the trace branch when the trace is positive, otherwise the
        branch of the largest diagonal entry, so no branch divides by a
        near-zero term for 180-degree rotations.

        :param matrix: 3x3 rotation, or 4x4 whose upper-left 3x3 is used
        :raises ValueError: For any other shape
        """
        if matrix.shape == (4, 4):
            matrix = matrix.view(3, 3)
        elif matrix.shape != (3, 3):
            raise ValueError(
                f"Expected a 3x3 or 4x4 rotation matrix, got Matrix<{matrix.rows}, {matrix.cols}>"
            )

        m = matrix.to_numpy().astype(float)
        trace = m[0, 0] + m[1, 1] + m[2, 2]

        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            w = 0.25 * s
            x = (m[2, 1] - m[1, 2]) / s
            y = (m[0, 2] - m[2, 0]) / s
            z = (m[1, 0] - m[0, 1]) / s
        elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
            s = math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2]) * 2.0
            w = (m[2, 1] - m[1, 2]) / s
            x = 0.25 * s
            y = (m[0, 1] + m[1, 0]) / s
            z = (m[0, 2] + m[2, 0]) / s
        elif m[1, 1] > m[2, 2]:
            s = math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2]) * 2.0
            w = (m[0, 2] - m[2, 0]) / s
            x = (m[0, 1] + m[1, 0]) / s
            y = 0.25 * s
            z = (m[1, 2] + m[2, 1]) / s
        else:
            s = math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1]) * 2.0
            w = (m[1, 0] - m[0, 1]) / s
            x = (m[0, 2] + m[2, 0]) / s
            y = (m[1, 2] + m[2, 1]) / s
            z = 0.25 * s

        return cls.new_normalized(Vec3(x, y, z), w)

    # ------------------------------------------------------------------
    # Read-only access
    # ------------------------------------------------------------------

    @property
    def vector(self) -> Vec3:
        """Copy of the imaginary part."""
        return self._quat.vector.copy()

    @property
    def scalar(self) -> float:
        return self._quat.scalar

    @property
    def quaternion(self) -> Quaternion:
        """Copy of the wrapped quaternion."""
        return Quaternion(self._quat.vector, self._quat.scalar)

    def to_array(self) -> tuple[float, float, float, float]:
        """Return ``(x, y, z, w)``."""
        return self._quat.to_array()

    def magnitude(self) -> float:
        return self._quat.magnitude()

    def dot(self, other: UnitQuaternion | Quaternion) -> float:
        other_quat = other._quat if isinstance(other, UnitQuaternion) else other
        return self._quat.dot(other_quat)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def conjugate(self) -> UnitQuaternion:
        return UnitQuaternion._from_normalized(self._quat.conjugate())

    def inverse(self) -> UnitQuaternion:
        """For unit quaternions the inverse is the conjugate."""
        return self.conjugate()

    @overload
    def __mul__(self, other: UnitQuaternion) -> UnitQuaternion: ...

    @overload
    def __mul__(self, other: Vec3) -> Vec3: ...

    def __mul__(self, other):
        """Compose rotations (renormalized), or rotate a ``Vec3``."""
        if isinstance(other, UnitQuaternion):
            return UnitQuaternion(self._quat * other._quat)
        if isinstance(other, Vec3):
            return self.rotate_vector(other)
        return NotImplemented

    def __neg__(self) -> UnitQuaternion:
        """Same rotation, opposite hemisphere."""
        return UnitQuaternion._from_normalized(-self._quat)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitQuaternion):
            return NotImplemented
        return self._quat == other._quat

    __hash__ = None  # type: ignore[assignment]

    def is_close(self, other: UnitQuaternion, epsilon: float = DEFAULT_COMPARE_EPSILON) -> bool:
        return self._quat.is_close(other._quat, epsilon)

    def is_same_rotation(
        self, other: UnitQuaternion, epsilon: float = DEFAULT_COMPARE_EPSILON
    ) -> bool:
        """Compare up to the q / -q double cover."""
        return self.is_close(other, epsilon) or self.is_close(-other, epsilon)

    def __repr__(self) -> str:
        x, y, z, w = self.to_array()
        return f"UnitQuaternion(x={x!r}, y={y!r}, z={z!r}, w={w!r})"

    # ------------------------------------------------------------------
    # Application and conversion
    # ------------------------------------------------------------------

    def rotate_vector(self, vector: Vec3 | ArrayLike) -> Vec3:
        """Rotate by conjugation ``q * (v, 0) * q^-1``."""
        rotated = self._quat * Quaternion.from_vector(vector) * self._quat.conjugate()
        return rotated.vector

    def to_axis_angle(self) -> tuple[Vec3, float]:
        """Return (unit axis, angle in radians).

        Near the identity the axis is undefined and defaults to +X.
        """
        w = max(-1.0, min(1.0, self._quat.scalar))
        angle = 2.0 * math.acos(w)
        sin_half_angle = math.sqrt(max(0.0, 1.0 - w * w))
        if sin_half_angle < EPSILON:
            logger.debug("to_axis_angle: near-identity rotation, defaulting axis to X")
            return Vec3(1.0, 0.0, 0.0), angle
        return self._quat.vector / sin_half_angle, angle

    def to_euler_angles(self) -> Vec3:
        """Extract (x, y, z) angles of the intrinsic Y-X-Z decomposition.

        At gimbal lock the X angle saturates to +-pi/2 instead of NaN.
        """
        qx, qy, qz, qw = self.to_array()

        sinp_arg = 2.0 * (qw * qx - qy * qz)
        if abs(sinp_arg) >= 1.0:
            logger.debug("to_euler_angles: gimbal lock (sin=%f), clamping pitch", sinp_arg)
            pitch = math.copysign(math.pi / 2.0, sinp_arg)
        else:
            pitch = math.asin(sinp_arg)

        siny_cosp = 2.0 * (qw * qy + qx * qz)
        cosy_cosp = 1.0 - 2.0 * (qx * qx + qy * qy)
        yaw = math.atan2(siny_cosp, cosy_cosp)

        sinr_cosp = 2.0 * (qw * qz + qx * qy)
        cosr_cosp = 1.0 - 2.0 * (qx * qx + qz * qz)
        roll = math.atan2(sinr_cosp, cosr_cosp)

        return Vec3(pitch, yaw, roll)

    def homogeneous_matrix(self) -> Mat4:
        """4x4 rotation with an identity translation row/column."""
        x, y, z, w = self.to_array()

        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z

        return Mat4.from_columns(
            [
                [1.0 - 2.0 * (yy + zz), 2.0 * (xy + wz), 2.0 * (xz - wy), 0.0],
                [2.0 * (xy - wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz + wx), 0.0],
                [2.0 * (xz + wy), 2.0 * (yz - wx), 1.0 - 2.0 * (xx + yy), 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    def rotation_matrix(self) -> Mat3:
        return self.homogeneous_matrix().view(3, 3)

    def slerp(self, other: UnitQuaternion, t: float) -> UnitQuaternion:
        """Spherical linear interpolation along the shorter arc.

        :param other: End rotation (``t = 1``)
        :param t: Interpolation parameter, usually in [0, 1]
        """
        ax, ay, az, aw = self.to_array()
        bx, by, bz, bw = other.to_array()

        dot = ax * bx + ay * by + az * bz + aw * bw
        if dot < 0.0:
            bx, by, bz, bw = -bx, -by, -bz, -bw
            dot = -dot

        if dot > SLERP_DOT_THRESHOLD:
            logger.debug("slerp: nearly parallel inputs (dot=%f), using lerp", dot)
            result = Quaternion(
                Vec3(ax + (bx - ax) * t, ay + (by - ay) * t, az + (bz - az) * t),
                aw + (bw - aw) * t,
            )
            return UnitQuaternion(result)

        theta_0 = math.acos(dot)
        theta = theta_0 * t
        sin_theta_0 = math.sin(theta_0)

        scale_a = math.sin(theta_0 - theta) / sin_theta_0
        scale_b = math.sin(theta) / sin_theta_0

        result = Quaternion(
            Vec3(
                ax * scale_a + bx * scale_b,
                ay * scale_a + by * scale_b,
                az * scale_a + bz * scale_b,
            ),
            aw * scale_a + bw * scale_b,
        )
        return UnitQuaternion(result)
