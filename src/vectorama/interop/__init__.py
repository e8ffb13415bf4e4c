"""Optional converters for PyTorch tensors and scipy rotations.

Import the submodule you need; each requires its extra to be installed:

    >>> from vectorama.interop.torch import matrix_to_tensor  # pip install vectorama[torch]
    >>> from vectorama.interop.scipy import to_rotation  # pip install vectorama[scipy]
"""
