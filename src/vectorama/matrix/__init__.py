"""
Fixed-shape column-major matrices.

Example:
    >>> from vectorama.matrix import Mat4
    >>> view = Mat4.look_at((0, 0, 5), (0, 0, 0), (0, 1, 0))
    >>> proj = Mat4.perspective(16 / 9, 0.785, 0.1, 100.0)
    >>> clip = proj @ view
"""

from vectorama.matrix.matrix import Mat2, Mat3, Mat4, Matrix

__all__ = [
    "Matrix",
    "Mat2",
    "Mat3",
    "Mat4",
]
