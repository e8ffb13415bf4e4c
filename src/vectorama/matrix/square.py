"""Square-matrix kernels: identity, determinant, inversion, camera builders.

Mixed into ``Matrix``. Every method checks squareness at runtime; the
camera builders always produce 4x4 matrices.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from vectorama.config import DTYPE
from vectorama.matrix.kernels import (
    determinant3_numba,
    determinant4_numba,
    gauss_jordan_inverse_numba,
)

if TYPE_CHECKING:
    from vectorama.matrix.matrix import Matrix
    from vectorama.types import ArrayLike
    from vectorama.vector import Vec3

logger = logging.getLogger(__name__)


def _as_vec3(value: Vec3 | ArrayLike) -> Vec3:
    from vectorama.vector import Vec3

    if isinstance(value, Vec3):
        return value
    return Vec3.from_components(value)


class SquareMatrixOps:
    """Operations only defined for ``M x M`` matrices."""

    __slots__ = ()

    def _require_square(self: Matrix, op: str) -> int:
        rows, cols = self.shape
        if rows != cols:
            raise ValueError(f"{op} requires a square matrix, got Matrix<{rows}, {cols}>")
        return rows

    @classmethod
    def _camera_class(cls, op: str) -> type[Matrix]:
        from vectorama.matrix.matrix import _class_for

        fixed = cls._fixed_shape  # type: ignore[attr-defined]
        if fixed is not None and fixed != (4, 4):
            raise ValueError(f"{op} builds a 4x4 matrix, not {cls.__name__}")
        return _class_for(4, 4)

    @classmethod
    def identity(cls, size: int | None = None) -> Matrix:
        """Return the identity matrix.

        :param size: Dimension (implied by shaped classes)
        :returns: Matrix with ones on the diagonal and zeros elsewhere
        """
        from vectorama.matrix.matrix import _class_for

        rows, cols = cls._resolve_shape(size, size)  # type: ignore[attr-defined]
        if rows != cols:
            raise ValueError(f"identity requires a square shape, got {rows}x{cols}")
        return _class_for(rows, rows)._from_array(np.eye(rows, dtype=DTYPE))

    def determinant(self: Matrix) -> float:
        """Determinant for 1x1 through 4x4 matrices.

        2x2 uses ``ad - bc``, 3x3 cofactor expansion along the first row and
        4x4 Laplace expansion along the first row over 3x3 minors.

        :raises ValueError: If the matrix is not square or larger than 4x4
        """
        size = self._require_square("determinant")
        rows_major = np.ascontiguousarray(self._columns.T)

        if size == 1:
            return float(rows_major[0, 0])
        if size == 2:
            a = rows_major
            return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])
        if size == 3:
            return float(determinant3_numba(rows_major))
        if size == 4:
            return float(determinant4_numba(rows_major))
        raise ValueError(f"determinant is only implemented up to 4x4, got {size}x{size}")

    def try_inverse(self: Matrix) -> Matrix | None:
        """Invert with Gauss-Jordan elimination and partial pivoting.

        :returns: The inverse, or None when the matrix is smaller than 2x2
            or singular (a pivot below float32 epsilon)
        """
        size = self._require_square("try_inverse")
        if size < 2:
            logger.debug("try_inverse: no inverse defined for a %dx%d matrix", size, size)
            return None

        rows_major = np.ascontiguousarray(self._columns.T)
        out = np.empty((size, size), dtype=DTYPE)
        if not gauss_jordan_inverse_numba(rows_major, out):
            logger.debug("try_inverse: singular %dx%d matrix", size, size)
            return None

        return self._wrap(out.T)

    # ------------------------------------------------------------------
    # Camera / projection builders (4x4)
    # ------------------------------------------------------------------

    @classmethod
    def look_at(
        cls,
        eye: Vec3 | ArrayLike,
        target: Vec3 | ArrayLike,
        up: Vec3 | ArrayLike,
    ) -> Matrix:
        """Build a right-handed view matrix.

        The camera looks down -Z in view space. Rows 0-2 of the rotation
        block hold the right, up and backward axes; the last column holds
        the eye position expressed in that basis, negated.

        :param eye: Camera position
        :param target: Point the camera looks at
        :param up: Approximate up direction
        :returns: 4x4 view matrix
        """
        out_cls = cls._camera_class("look_at")
        eye, target, up = _as_vec3(eye), _as_vec3(target), _as_vec3(up)

        forward = (target - eye).normalize()
        right = forward.cross(up).normalize()
        true_up = right.cross(forward)

        view = out_cls.identity()
        for col in range(3):
            view[0, col] = right[col]
            view[1, col] = true_up[col]
            view[2, col] = -forward[col]

        view[0, 3] = -right.dot(eye)
        view[1, 3] = -true_up.dot(eye)
        view[2, 3] = forward.dot(eye)
        return view

    @classmethod
    def perspective(cls, aspect: float, fov: float, near: float, far: float) -> Matrix:
        """Build an OpenGL-style right-handed perspective projection.

        :param aspect: Width / height
        :param fov: Vertical field of view in radians
        :param near: Near clipping plane
        :param far: Far clipping plane
        :returns: 4x4 projection with the w-divide in row 3
        """
        out_cls = cls._camera_class("perspective")
        f = 1.0 / math.tan(fov / 2.0)

        proj = out_cls.zeros()
        proj[0, 0] = f / aspect
        proj[1, 1] = f
        proj[2, 2] = (far + near) / (near - far)
        proj[3, 2] = -1.0
        proj[2, 3] = (2.0 * far * near) / (near - far)
        return proj

    @classmethod
    def orthographic(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> Matrix:
        """Build an orthographic projection.

        Translation terms are stored in row 3, not column 3.

        :returns: 4x4 orthographic projection
        """
        out_cls = cls._camera_class("orthographic")

        ortho = out_cls.zeros()
        ortho[0, 0] = 2.0 / (right - left)
        ortho[1, 1] = 2.0 / (top - bottom)
        ortho[2, 2] = -2.0 / (far - near)
        ortho[3, 0] = -(right + left) / (right - left)
        ortho[3, 1] = -(top + bottom) / (top - bottom)
        ortho[3, 2] = -(far + near) / (far - near)
        ortho[3, 3] = 1.0
        return ortho
