"""
Column vectors: generic ``Vector`` plus sized ``Vec2``, ``Vec3``, ``Vec4``.

Example:
    >>> from vectorama.vector import Vec3
    >>> Vec3(3, 4, 12).magnitude()
    13.0
"""

from vectorama.vector.named import Vec2, Vec3, Vec4
from vectorama.vector.vector import Vector

__all__ = [
    "Vector",
    "Vec2",
    "Vec3",
    "Vec4",
]
