"""
Tests for the accretion height generator.
"""

import numpy as np
import pytest

from terrain_generator import accretion
from terrain_generator.exceptions import ConfigurationError
from terrain_generator.random_source import RandomSource


DEFAULT_CENTERS = [(400, 400), (100, 100), (400, 100)]


class TestSplat:
    """Deposits around a single walker position."""

    def test_splat_covers_inclusive_disc(self):
        grid = np.zeros((32, 32), dtype=np.uint8)
        accretion.splat(grid, 16, 16, 3)

        xs, zs = np.nonzero(grid)
        dist_sq = (xs - 16) ** 2 + (zs - 16) ** 2
        assert np.all(dist_sq <= 9)
        # Cells exactly on the radius are included.
        assert grid[19, 16] == 1
        assert grid[16, 13] == 1
        assert grid[19, 17] == 0
        # Every cell of the disc got exactly one unit.
        expected = sum(1 for dx in range(-3, 4) for dz in range(-3, 4) if dx * dx + dz * dz <= 9)
        assert int(grid.sum()) == expected

    def test_zero_radius_touches_one_cell(self):
        grid = np.zeros((8, 8), dtype=np.uint8)
        accretion.splat(grid, 2, 5, 0)
        assert int(grid.sum()) == 1
        assert grid[2, 5] == 1

    def test_cells_outside_grid_are_skipped(self):
        grid = np.zeros((16, 16), dtype=np.uint8)
        accretion.splat(grid, 0, 0, 4)

        assert grid[0, 0] == 1
        assert grid[4, 0] == 1
        # No wraparound onto the opposite edges.
        assert grid[15, :].sum() == 0
        assert grid[:, 15].sum() == 0

    def test_repeated_splats_clamp_at_255(self):
        grid = np.zeros((16, 16), dtype=np.uint8)
        for _ in range(300):
            accretion.splat(grid, 8, 8, 2)

        assert grid[8, 8] == 255
        assert grid.max() == 255


class TestWalker:
    """Walker movement and boundary resets."""

    @pytest.fixture
    def centers(self):
        return np.array(DEFAULT_CENTERS, dtype=np.int64)

    def test_step_moves_both_axes(self, centers):
        x, z, was_reset = accretion.step_walker(200, 200, True, False, 0, centers, 3, 512, 512, 50)
        assert (x, z) == (203, 197)
        assert not was_reset

    def test_leaving_interior_resets_to_chosen_center(self, centers):
        # 52 - 3 = 49 is inside the 50-cell margin.
        x, z, was_reset = accretion.step_walker(52, 200, False, True, 1, centers, 3, 512, 512, 50)
        assert was_reset
        assert (x, z) == (100, 100)

    def test_high_side_bound_is_exclusive(self, centers):
        x, z, was_reset = accretion.step_walker(459, 200, True, True, 2, centers, 3, 512, 512, 50)
        # 462 == 512 - 50 is outside the interior.
        assert was_reset
        assert (x, z) == (400, 100)

    def test_out_of_bounds_position_is_not_splatted(self):
        grid = np.zeros((512, 512), dtype=np.uint8)
        centers = np.array([(50, 200)], dtype=np.int64)
        x_coins = np.array([False])
        z_coins = np.array([True])
        resets = np.array([0], dtype=np.int64)

        # The only step lands on (49, 201), outside a 50-cell margin.
        x, z = accretion.run_walk(grid, centers, 0, x_coins, z_coins, resets, 1, 5, 50)

        assert (x, z) == (50, 200)
        assert grid.sum() == 0

    def test_walk_splats_each_in_bounds_step(self):
        grid = np.zeros((64, 64), dtype=np.uint8)
        centers = np.array([(32, 32)], dtype=np.int64)
        x_coins = np.array([True, True, True])
        z_coins = np.array([True, True, True])
        resets = np.zeros(3, dtype=np.int64)

        x, z = accretion.run_walk(grid, centers, 0, x_coins, z_coins, resets, 1, 0, 8)

        assert (x, z) == (35, 35)
        assert grid[33, 33] == 1
        assert grid[34, 34] == 1
        assert grid[35, 35] == 1
        # The start position itself is not deposited.
        assert grid[32, 32] == 0


class TestGenerate:
    """The full accretion generator."""

    def test_values_in_range_and_dtype(self):
        grid = accretion.generate(128, 64, [(64, 32)], 2, 6, 2000, 10, RandomSource(3))
        assert grid.shape == (128, 64)
        assert grid.dtype == np.uint8
        assert grid.min() >= 0
        assert grid.max() <= 255

    def test_deterministic_for_same_seed(self):
        args = (64, 64, [(32, 32), (24, 40)], 1, 4, 800, 8)
        first = accretion.generate(*args, RandomSource(99))
        second = accretion.generate(*args, RandomSource(99))
        np.testing.assert_array_equal(first, second)

    def test_heavy_dwell_saturates_at_255(self):
        # The interior is only [31, 33) on each axis, so the walker never
        # leaves the neighbourhood of (32, 32).
        grid = accretion.generate(64, 64, [(32, 32)], 1, 8, 5000, 31, RandomSource(5))
        assert grid[32, 32] == 255
        assert grid.max() == 255

    def test_deposits_stay_within_margin_plus_radius(self):
        grid = accretion.generate(128, 128, [(40, 40), (90, 80)], 2, 5, 3000, 20, RandomSource(11))
        xs, zs = np.nonzero(grid)
        assert xs.size > 0
        assert xs.min() >= 20 - 5 and xs.max() < 128 - 20 + 5
        assert zs.min() >= 20 - 5 and zs.max() < 128 - 20 + 5

    def test_zero_iterations_gives_flat_grid(self):
        grid = accretion.generate(32, 32, [(16, 16)], 1, 2, 0, 3, RandomSource(0))
        assert not grid.any()

    def test_noise_floor_only_touches_untouched_cells(self):
        plain = accretion.generate(64, 64, [(32, 32)], 1, 3, 200, 4, RandomSource(8))
        noisy = accretion.generate(64, 64, [(32, 32)], 1, 3, 200, 4, RandomSource(8), noise_ceiling=3)

        raised = plain > 0
        np.testing.assert_array_equal(plain[raised], noisy[raised])
        assert noisy[~raised].max() <= 2
        assert noisy[~raised].any()

    def test_default_noise_floor_keeps_plains_at_zero(self):
        grid = accretion.generate(64, 64, [(32, 32)], 1, 3, 50, 4, RandomSource(8))
        assert (grid == 0).any()


class TestGenerateValidation:
    """Precondition violations are configuration errors."""

    @pytest.mark.parametrize("kwargs", [
        dict(width=100),
        dict(height=0),
        dict(seed_centers=[]),
        dict(seed_centers=[(7, 32)]),
        dict(seed_centers=[(32, 56)]),
        dict(step_size=0),
        dict(splat_radius=-1),
        dict(iterations=-5),
        dict(margin_width=4),
        dict(noise_ceiling=0),
    ])
    def test_invalid_parameters_rejected(self, kwargs):
        params = dict(
            width=64, height=64, seed_centers=[(32, 32)], step_size=1,
            splat_radius=4, iterations=10, margin_width=8, noise_ceiling=1,
        )
        params.update(kwargs)
        with pytest.raises(ConfigurationError):
            accretion.generate(rng=RandomSource(0), **params)

    @pytest.mark.parametrize("kwargs", [
        dict(step_size="3"),
        dict(splat_radius=4.5),
        dict(iterations=None),
        dict(margin_width="8"),
        dict(seed_centers=[("32", 32)]),
        dict(seed_centers=[32, 32]),
    ])
    def test_non_integer_parameters_rejected(self, kwargs):
        params = dict(
            width=64, height=64, seed_centers=[(32, 32)], step_size=1,
            splat_radius=4, iterations=10, margin_width=8,
        )
        params.update(kwargs)
        with pytest.raises(ConfigurationError):
            accretion.generate(rng=RandomSource(0), **params)

    def test_array_of_centers_accepted(self):
        centers = np.array([(32, 32), (20, 40)])
        from_array = accretion.generate(64, 64, centers, 1, 4, 50, 8, RandomSource(0))
        from_list = accretion.generate(64, 64, [(32, 32), (20, 40)], 1, 4, 50, 8, RandomSource(0))
        np.testing.assert_array_equal(from_array, from_list)

    def test_empty_array_of_centers_rejected(self):
        with pytest.raises(ConfigurationError):
            accretion.generate(64, 64, np.empty((0, 2), dtype=int), 1, 4, 50, 8, RandomSource(0))

    def test_center_on_low_margin_is_valid(self):
        grid = accretion.generate(64, 64, [(8, 8)], 1, 4, 10, 8, RandomSource(0))
        assert grid.shape == (64, 64)


class TestEndToEnd:
    """The reference configuration at full size."""

    def test_reference_terrain(self):
        grid = accretion.generate(512, 512, DEFAULT_CENTERS, 3, 24, 10000, 50, RandomSource(2024))

        assert grid.max() <= 255
        xs, zs = np.nonzero(grid)
        # At least one full splat disc worth of coverage.
        assert xs.size >= int(np.pi * 24 ** 2)
        # The walker stays in [50, 462), so deposits stay within a radius of it.
        assert xs.min() >= 26 and xs.max() < 486
        assert zs.min() >= 26 and zs.max() < 486
