"""Numeric policy shared by every vectorama type.

All storage is single precision. The constants below are the ones the
degenerate-input guards, ``is_close`` and ``slerp`` compare against.
"""

from __future__ import annotations

import numpy as np

DTYPE = np.float32

# Machine epsilon for float32 (~1.19e-7)
EPSILON: float = float(np.finfo(np.float32).eps)

# Above this dot product slerp switches to normalized lerp
SLERP_DOT_THRESHOLD: float = 0.9995

# Default absolute tolerance for is_close
DEFAULT_COMPARE_EPSILON: float = 1e-6
