"""
Quaternions and unit quaternions (rotations).

Array forms are scalar-last ``[x, y, z, w]``; Euler angles are (x, y, z)
radians composed intrinsically as Y, X, Z.
"""

from vectorama.quaternion.quaternion import Quaternion
from vectorama.quaternion.unit import UnitQuaternion

__all__ = ["Quaternion", "UnitQuaternion"]
