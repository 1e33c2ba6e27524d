# terrain_generator/linearize.py

"""
================================================================================
GRID LINEARIZER
================================================================================
Texture upload takes a flat pixel buffer, not a 2D grid. These functions
convert between the two layouts.

Order: the outer loop runs over x and the inner loop over z, so the cell
[x, z] lands at buffer index `x * height + z`. Height and color grids use
the same order. Trailing channel axes are carried through unchanged.
================================================================================
"""

import numpy as np

from .exceptions import ConfigurationError


def linearize(grid: np.ndarray, width: int, height: int) -> np.ndarray:
    """Returns a new flat buffer of length width * height (plus any channel axis)."""
    if grid.ndim < 2 or grid.shape[:2] != (width, height):
        raise ConfigurationError(
            f"Grid of shape {grid.shape} does not match declared size {width}x{height}"
        )
    return np.array(grid.reshape((width * height,) + grid.shape[2:]), copy=True)


def delinearize(buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """Inverse of linearize: rebuilds the [x, z] grid from a flat buffer."""
    if buffer.ndim < 1 or buffer.shape[0] != width * height:
        raise ConfigurationError(
            f"Buffer of length {buffer.shape[0] if buffer.ndim else 0} does not match "
            f"declared size {width}x{height}"
        )
    return np.array(buffer.reshape((width, height) + buffer.shape[1:]), copy=True)
