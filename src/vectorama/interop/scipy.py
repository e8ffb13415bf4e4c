"""Conversions between ``UnitQuaternion`` and ``scipy.spatial.transform.Rotation``.

Both sides store quaternions scalar-last, so the component copy is direct.
Euler angles: vectorama's (x, y, z) compose intrinsically as Y, X, Z,
which is scipy's ``"YXZ"`` sequence with angles ordered (y, x, z).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vectorama.quaternion import UnitQuaternion
from vectorama.vector import Vec3

if TYPE_CHECKING:
    from scipy.spatial.transform import Rotation

_EULER_SEQUENCE = "YXZ"


def to_rotation(quaternion: UnitQuaternion) -> Rotation:
    """Convert to a scipy ``Rotation``."""
    from scipy.spatial.transform import Rotation

    return Rotation.from_quat(list(quaternion.to_array()))


def from_rotation(rotation: Rotation) -> UnitQuaternion:
    """Convert a single scipy ``Rotation``.

    :raises ValueError: If ``rotation`` holds more than one rotation
    """
    if not rotation.single:
        raise ValueError(f"Expected a single rotation, got a stack of {len(rotation)}")
    return UnitQuaternion.from_array(rotation.as_quat())


def euler_to_rotation(angles: Vec3) -> Rotation:
    """Build a scipy ``Rotation`` from vectorama (x, y, z) Euler angles."""
    from scipy.spatial.transform import Rotation

    return Rotation.from_euler(_EULER_SEQUENCE, [angles.y, angles.x, angles.z])


def euler_from_rotation(rotation: Rotation) -> Vec3:
    """Extract vectorama (x, y, z) Euler angles from a scipy ``Rotation``."""
    y, x, z = rotation.as_euler(_EULER_SEQUENCE)
    return Vec3(x, y, z)
