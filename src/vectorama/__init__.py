"""
vectorama - Fixed-dimension linear algebra for 3D graphics

Column-major float32 matrices and vectors laid out like OpenGL and glTF
buffers, with quaternion rotations and camera builders.

Features:
- Matrix / Mat2 / Mat3 / Mat4 with column-major storage and flat-buffer interop
- Determinant, Gauss-Jordan inversion (Numba kernels), look_at, perspective, orthographic
- Vector / Vec2 / Vec3 / Vec4 with named components, dot, cross, normalize
- Quaternion and UnitQuaternion: Euler (YXZ), axis-angle, rotation matrices, slerp
- Translation2/3 and Scale2/3 homogeneous wrappers
- Optional PyTorch and scipy converters in ``vectorama.interop``

Example:
    >>> from vectorama import Mat4, UnitQuaternion, Vec3
    >>>
    >>> view = Mat4.look_at(Vec3(0, 0, 5), Vec3(0, 0, 0), Vec3(0, 1, 0))
    >>> proj = Mat4.perspective(16 / 9, 1.0, 0.1, 100.0)
    >>> rotation = UnitQuaternion.from_euler_angles(0.0, 1.57, 0.0)
    >>> mvp = proj @ view @ rotation.homogeneous_matrix()
    >>> gl_buffer = mvp.as_flattened()  # 16 float32 values, column after column
"""

__version__ = "0.1.0"

# Numeric policy
from vectorama.config import (
    DEFAULT_COMPARE_EPSILON,
    DTYPE,
    EPSILON,
    SLERP_DOT_THRESHOLD,
)

# Matrices
from vectorama.matrix import Mat2, Mat3, Mat4, Matrix

# Quaternions
from vectorama.quaternion import Quaternion, UnitQuaternion

# Transforms
from vectorama.transform import (
    Scale2,
    Scale3,
    Translation2,
    Translation3,
    scale_from_homogeneous,
    scale_to_homogeneous,
    translation_from_homogeneous,
    translation_to_homogeneous,
)

# Vectors
from vectorama.vector import Vec2, Vec3, Vec4, Vector

__all__ = [
    # Config
    "DTYPE",
    "EPSILON",
    "SLERP_DOT_THRESHOLD",
    "DEFAULT_COMPARE_EPSILON",
    # Matrices
    "Matrix",
    "Mat2",
    "Mat3",
    "Mat4",
    # Vectors
    "Vector",
    "Vec2",
    "Vec3",
    "Vec4",
    # Quaternions
    "Quaternion",
    "UnitQuaternion",
    # Transforms
    "Translation2",
    "Translation3",
    "Scale2",
    "Scale3",
    "translation_to_homogeneous",
    "translation_from_homogeneous",
    "scale_to_homogeneous",
    "scale_from_homogeneous",
    "__version__",
]
