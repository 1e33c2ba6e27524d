# terrain_generator/legacy.py

"""
================================================================================
LEGACY PYRAMID GENERATOR
================================================================================
The older terrain layout: a low, noisy grass plain with a single stepped
pyramid standing on it. Kept as an alternative generation strategy and
selected with `generation_strategy = 'pyramid'`.

Data Contract:
---------------
- Inputs: grid dimensions, pyramid geometry and a RandomSource.
- Outputs: A uint8 array of shape (width, height) indexed [x, z].
- Invariants: Plain cells lie in [0, plain_ceiling); pyramid cells are a
  multiple of brick_height, clamped to 255.
================================================================================
"""

import math

import numpy as np

from .random_source import RandomSource
from .validation import validate_pyramid_parameters


def pyramid_heights(side: int, brick_height: int, step: int) -> np.ndarray:
    """
    Builds the pyramid footprint. Each step inward adds one brick to a square
    that shrinks by `step` cells on every side.
    """
    heights = np.zeros((side, side), dtype=np.int64)
    diagonal = int(math.sqrt(2 * side ** 2))
    for s in range(0, diagonal, step):
        if s >= side - s:
            break
        heights[s:side - s, s:side - s] += brick_height
    return np.clip(heights, 0, 255).astype(np.uint8)


def generate_pyramid(
    width: int, height: int, rng: RandomSource, plain_ceiling: int = 3,
    center=(128, 128), side: int = 100, brick_height: int = 20, step: int = 5
) -> np.ndarray:
    """
    Generates the plain-and-pyramid height grid.

    Raises:
        ConfigurationError: If the dimensions are invalid or the pyramid
            footprint does not fit inside the grid.
    """
    validate_pyramid_parameters(width, height, plain_ceiling, center, side, brick_height, step)

    x0, z0 = center[0] - side // 2, center[1] - side // 2
    grid = rng.integers(0, plain_ceiling, size=(width, height)).astype(np.uint8)
    grid[x0:x0 + side, z0:z0 + side] = pyramid_heights(side, brick_height, step)
    return grid
