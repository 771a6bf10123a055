"""Utility functions and helpers."""

# Import submodules explicitly when needed:
#   from proxroute.utils.math_utils import distance_3d

__all__ = [
    "math_utils",
]
