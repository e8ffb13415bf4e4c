"""
Translation and scale wrappers plus homogeneous-matrix helpers.

Example:
    >>> from vectorama.transform import Translation3, Scale3
    >>> from vectorama import Vec3
    >>> model = Translation3(1, 2, 3).homogeneous_matrix() @ Scale3(2, 2, 2).homogeneous_matrix()
    >>> Translation3.from_homogeneous_matrix(model)
    Translation3(1.0, 2.0, 3.0)
"""

from vectorama.transform.homogeneous import (
    scale_from_homogeneous,
    scale_to_homogeneous,
    translation_from_homogeneous,
    translation_to_homogeneous,
)
from vectorama.transform.scale import Scale2, Scale3
from vectorama.transform.translation import Translation2, Translation3

__all__ = [
    "Scale2",
    "Scale3",
    "Translation2",
    "Translation3",
    "scale_from_homogeneous",
    "scale_to_homogeneous",
    "translation_from_homogeneous",
    "translation_to_homogeneous",
]
