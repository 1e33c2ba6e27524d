# terrain_generator/accretion.py

"""
================================================================================
ACCRETION HEIGHT GENERATOR
================================================================================
Builds a height field by letting a walker wander around a set of seed
centers. At every step each grid cell within the splat radius of the walker
gains one unit of height. When the walker leaves the safe interior it is
sent back to a randomly chosen seed center, which keeps the deposits
concentrated into ridges and dunes around the centers.

Data Contract:
---------------
- Inputs:
    - Grid dimensions, seed centers, step size, splat radius, iteration
      count, margin width and a RandomSource.
- Outputs:
    - A uint8 array of shape (width, height) indexed [x, z].
- Side Effects: Consumes draws from the RandomSource.
- Invariants: Every cell lies in [0, 255]. Given the same RandomSource seed
  and parameters the output is bit-identical.
================================================================================
"""

import numpy as np
from numba import njit

from .random_source import RandomSource
from .validation import validate_accretion_parameters

MAX_HEIGHT = 255


@njit
def in_interior(x, z, width, height, margin):
    """True if (x, z) lies in [margin, dim - margin) on both axes."""
    return margin <= x and x < width - margin and margin <= z and z < height - margin


@njit
def step_walker(x, z, x_up, z_up, reset_index, seed_centers, step, width, height, margin):
    """
    Moves the walker one step and resets it to seed_centers[reset_index] if it
    left the safe interior. Returns (x, z, was_reset).
    """
    x = x + step if x_up else x - step
    z = z + step if z_up else z - step
    if not in_interior(x, z, width, height, margin):
        return seed_centers[reset_index, 0], seed_centers[reset_index, 1], True
    return x, z, False


@njit
def splat(grid, x, z, radius):
    """
    Adds one unit to every cell within `radius` (inclusive) of (x, z).
    Cells outside the grid are skipped and values saturate at MAX_HEIGHT.
    """
    width, height = grid.shape
    radius_sq = radius * radius
    for i in range(x - radius, x + radius + 1):
        if i < 0 or i >= width:
            continue
        dx = i - x
        for k in range(z - radius, z + radius + 1):
            if k < 0 or k >= height:
                continue
            dz = k - z
            if dx * dx + dz * dz <= radius_sq and grid[i, k] < MAX_HEIGHT:
                grid[i, k] += 1


@njit
def run_walk(grid, seed_centers, start_index, x_coins, z_coins, reset_choices, step, radius, margin):
    """
    Runs the full random walk over pre-drawn coin flips and reset choices,
    splatting into `grid` in place. Returns the final walker position.
    """
    width, height = grid.shape
    x = seed_centers[start_index, 0]
    z = seed_centers[start_index, 1]
    for j in range(x_coins.shape[0]):
        x, z, was_reset = step_walker(
            x, z, x_coins[j], z_coins[j], reset_choices[j],
            seed_centers, step, width, height, margin
        )
        # An excursion out of the interior is discarded, not splatted.
        if not was_reset:
            splat(grid, x, z, radius)
    return x, z


def generate(
    width: int, height: int, seed_centers, step_size: int, splat_radius: int,
    iterations: int, margin_width: int, rng: RandomSource, noise_ceiling: int = 1
) -> np.ndarray:
    """
    Generates an accretion height grid.

    Args:
        width, height (int): Grid dimensions, positive powers of two.
        seed_centers: Sequence of (x, z) restart anchors inside the interior.
        step_size (int): Walker displacement per axis per iteration.
        splat_radius (int): Inclusive Euclidean radius of each deposit.
        iterations (int): Number of walker steps.
        margin_width (int): Border width the walker may not enter.
        rng (RandomSource): The shared random stream.
        noise_ceiling (int): Untouched cells get a value from [0, noise_ceiling).

    Raises:
        ConfigurationError: If any precondition is violated. No grid is
            allocated in that case.
    """
    validate_accretion_parameters(
        width, height, seed_centers, step_size, splat_radius,
        iterations, margin_width, noise_ceiling
    )
    centers = np.asarray(seed_centers, dtype=np.int64).reshape(-1, 2)
    num_centers = centers.shape[0]

    # All walk randomness is drawn up front so the compiled kernel stays pure.
    start_index = int(rng.choices(1, num_centers)[0])
    x_coins = rng.coin_flips(iterations)
    z_coins = rng.coin_flips(iterations)
    reset_choices = rng.choices(iterations, num_centers)

    grid = np.zeros((width, height), dtype=np.uint8)
    run_walk(
        grid, centers, start_index, x_coins, z_coins, reset_choices,
        step_size, splat_radius, margin_width
    )

    apply_noise_floor(grid, rng, noise_ceiling)
    return grid


def apply_noise_floor(grid: np.ndarray, rng: RandomSource, noise_ceiling: int):
    """
    Replaces cells the walk never reached with a small random value from
    [0, noise_ceiling), so the plains are not perfectly flat.
    """
    untouched = grid == 0
    count = int(np.count_nonzero(untouched))
    if count:
        grid[untouched] = rng.integers(0, noise_ceiling, size=count).astype(np.uint8)
