"""Type aliases for vectorama.

Provides unified type hints for array-like parameters across all modules.
"""

from collections.abc import Sequence
from typing import TypeAlias

import numpy as np

# Scalar accepted anywhere a float32 entry is written
Scalar: TypeAlias = float | int | np.floating

# Any flat run of numbers (components, flattened buffers)
ArrayLike: TypeAlias = Sequence[float] | np.ndarray

# Nested columns or rows for literal construction
NestedArrayLike: TypeAlias = Sequence[Sequence[float]] | np.ndarray
