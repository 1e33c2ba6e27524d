# terrain_generator/color_maps.py

"""
================================================================================
TERRAIN COLOR MAPPING
================================================================================
This module contains the color constants and functions for converting a
height grid into the color texture. Each cell is classified into a height
band, painted with that band's color and then jittered slightly.

It is a pure utility with no dependency on Pygame, so it can be used by the
viewer, the bake script and the tests alike.
================================================================================
"""
from enum import IntEnum

import numpy as np

from . import config as DEFAULTS
from .exceptions import ConfigurationError
from .random_source import RandomSource
from .validation import validate_bands, validate_jitter


class GrassVariant(IntEnum):
    """The three grass shades low terrain is randomly painted with."""
    DARK_GREEN = 0
    GREEN = 1
    OLIVE_DRAB = 2


GRASS_COLORS = {
    GrassVariant.DARK_GREEN: (0, 100, 0),
    GrassVariant.GREEN: (0, 128, 0),
    GrassVariant.OLIVE_DRAB: (107, 142, 35),
}

# --- Band Color Mappings ---
COLOR_MAP_BANDS = {
    "brown": (165, 42, 42),
    "tan": (210, 180, 140),
    "dark_gray": (169, 169, 169),
    "light_gray": (211, 211, 211),
    "white": (255, 255, 255),
}

# Band id 0 is reserved for grass; bands follow in threshold order.
BAND_ID_GRASS = 0

OPAQUE_ALPHA = 255


def create_band_color_lut(band_thresholds=None, top_band: str = None) -> np.ndarray:
    """
    Creates a LUT where the index is the band ID and the value is the RGB
    color. Grass variants occupy the first three rows, so the LUT index of a
    cell is `variant` for grass and `len(GrassVariant) + band_id - 1` otherwise.
    """
    band_thresholds = DEFAULTS.BAND_THRESHOLDS if band_thresholds is None else band_thresholds
    top_band = DEFAULTS.TOP_BAND if top_band is None else top_band
    unknown = [name for name in [n for _, n in band_thresholds] + [top_band] if name not in COLOR_MAP_BANDS]
    if unknown:
        raise ConfigurationError(f"Unknown band color(s): {unknown}")
    grass_rows = [GRASS_COLORS[variant] for variant in GrassVariant]
    band_rows = [COLOR_MAP_BANDS[name] for _, name in band_thresholds]
    band_rows.append(COLOR_MAP_BANDS[top_band])
    return np.array(grass_rows + band_rows, dtype=np.uint8)


def classify(height_grid: np.ndarray, grass_threshold: int = None, band_thresholds=None) -> np.ndarray:
    """
    Returns an integer band ID for each cell: BAND_ID_GRASS below the grass
    threshold, then 1..N for each threshold band in order and N+1 for the
    top band. Deterministic; grass variants are not resolved here.
    """
    grass_threshold = DEFAULTS.GRASS_THRESHOLD if grass_threshold is None else grass_threshold
    band_thresholds = DEFAULTS.BAND_THRESHOLDS if band_thresholds is None else band_thresholds
    validate_bands(grass_threshold, band_thresholds)

    h = height_grid.astype(np.int64)
    conditions = [h < grass_threshold] + [h < bound for bound, _ in band_thresholds]
    choices = list(range(len(conditions)))
    return np.select(conditions, choices, default=len(conditions)).astype(np.uint8)


def band_colors(
    height_grid: np.ndarray, rng: RandomSource, grass_threshold: int = None,
    band_thresholds=None, top_band: str = None
) -> np.ndarray:
    """Returns the pre-jitter RGB color of every cell, resolving grass variants at random."""
    band_thresholds = DEFAULTS.BAND_THRESHOLDS if band_thresholds is None else band_thresholds
    band_ids = classify(height_grid, grass_threshold, band_thresholds)
    lut = create_band_color_lut(band_thresholds, top_band)

    # Shift non-grass bands past the grass rows of the LUT.
    lut_index = band_ids.astype(np.int64) + (len(GrassVariant) - 1)
    grass_mask = band_ids == BAND_ID_GRASS
    grass_count = int(np.count_nonzero(grass_mask))
    if grass_count:
        lut_index[grass_mask] = rng.choices(grass_count, len(GrassVariant))
    return lut[lut_index]


def apply_jitter(colors: np.ndarray, rng: RandomSource, jitter_max: float) -> np.ndarray:
    """
    Brightens every cell by one uniform draw from [0, jitter_max) (normalized
    channel units), applied equally to all of its channels so grays stay gray,
    then clamps back to [0, 255].
    """
    validate_jitter(jitter_max)
    noise = rng.uniform(0.0, jitter_max, size=colors.shape[:-1])[..., np.newaxis] * 255.0
    jittered = np.rint(colors.astype(np.float64) + noise)
    return np.clip(jittered, 0, 255).astype(np.uint8)


def add_alpha(colors: np.ndarray) -> np.ndarray:
    """Appends a fully opaque alpha channel to an RGB array."""
    alpha = np.full(colors.shape[:-1] + (1,), OPAQUE_ALPHA, dtype=np.uint8)
    return np.concatenate([colors, alpha], axis=-1)


def colorize(
    height_grid: np.ndarray, grass_threshold: int, band_thresholds, rng: RandomSource,
    jitter_max: float = DEFAULTS.JITTER_MAX, include_alpha: bool = False, top_band: str = None
) -> np.ndarray:
    """
    Converts a height grid into the color grid.

    Returns:
        np.ndarray: uint8 array of shape (width, height, 3), or (..., 4) with
        an opaque alpha channel when include_alpha is set.
    """
    validate_jitter(jitter_max)
    colors = band_colors(height_grid, rng, grass_threshold, band_thresholds, top_band)
    colors = apply_jitter(colors, rng, jitter_max)
    if include_alpha:
        colors = add_alpha(colors)
    return colors


def get_height_color_array(height_grid: np.ndarray, include_alpha: bool = False) -> np.ndarray:
    """Converts a height grid into a grayscale RGB(A) array for the height texture."""
    gray_values = height_grid.astype(np.uint8)
    colors = np.stack([gray_values] * 3, axis=-1)
    if include_alpha:
        colors = add_alpha(colors)
    return colors
