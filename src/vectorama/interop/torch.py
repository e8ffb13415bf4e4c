"""Conversions between vectorama values and PyTorch tensors.

Matrices map to ``(rows, cols)`` tensors indexed ``[row, col]``; vectors
to 1-D tensors. Quaternion tensors follow the tensor stack's convention:

Quaternion Convention: (w, x, y, z) - scalar first
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vectorama.matrix import Matrix
from vectorama.quaternion import Quaternion, UnitQuaternion
from vectorama.vector import Vec3, Vector

if TYPE_CHECKING:
    import torch


def _to_numpy(tensor: torch.Tensor):
    return tensor.detach().cpu().numpy()


# ============================================================================
# Matrices and vectors
# ============================================================================


def matrix_to_tensor(
    matrix: Matrix,
    device: str | torch.device = "cpu",
    dtype: torch.dtype | None = None,
) -> torch.Tensor:
    """Copy a matrix into a ``(rows, cols)`` tensor.

    :param matrix: Source matrix
    :param device: Target device
    :param dtype: Target dtype (float32 when omitted)
    :returns: New tensor, independent of the matrix storage
    """
    import torch

    tensor = torch.from_numpy(matrix.to_numpy()).to(device)
    return tensor if dtype is None else tensor.to(dtype)


def matrix_from_tensor(tensor: torch.Tensor) -> Matrix:
    """Build a matrix from a 2-D tensor indexed ``[row, col]``.

    :raises ValueError: If the tensor is not 2-D
    """
    if tensor.dim() != 2:
        raise ValueError(f"Expected a 2-D tensor, got shape {tuple(tensor.shape)}")
    return Matrix.from_rows(_to_numpy(tensor))


def vector_to_tensor(
    vector: Vector,
    device: str | torch.device = "cpu",
    dtype: torch.dtype | None = None,
) -> torch.Tensor:
    import torch

    tensor = torch.from_numpy(vector.to_numpy().reshape(-1)).to(device)
    return tensor if dtype is None else tensor.to(dtype)


def vector_from_tensor(tensor: torch.Tensor) -> Vector:
    """Build the canonical vector class (``Vec3`` for 3 elements, ...).

    :raises ValueError: If the tensor is not 1-D
    """
    if tensor.dim() != 1:
        raise ValueError(f"Expected a 1-D tensor, got shape {tuple(tensor.shape)}")
    return Vector.from_components(_to_numpy(tensor))


# ============================================================================
# Quaternions
# ============================================================================


def quaternion_to_tensor(
    quaternion: Quaternion | UnitQuaternion,
    device: str | torch.device = "cpu",
    dtype: torch.dtype | None = None,
) -> torch.Tensor:
    """Pack a quaternion as a ``[4]`` tensor (w, x, y, z)."""
    import torch

    x, y, z, w = quaternion.to_array()
    return torch.tensor([w, x, y, z], dtype=dtype or torch.float32, device=device)


def quaternion_from_tensor(tensor: torch.Tensor, unit: bool = True) -> Quaternion | UnitQuaternion:
    """Unpack a ``[4]`` tensor (w, x, y, z).

    :param tensor: Quaternion tensor, scalar first
    :param unit: Return a normalized ``UnitQuaternion`` (default) or a raw ``Quaternion``
    :raises ValueError: If the tensor does not have shape ``[4]``
    """
    if tuple(tensor.shape) != (4,):
        raise ValueError(f"Expected a quaternion tensor of shape [4], got {tuple(tensor.shape)}")
    w, x, y, z = (float(v) for v in _to_numpy(tensor))
    quaternion = Quaternion(Vec3(x, y, z), w)
    return UnitQuaternion(quaternion) if unit else quaternion
