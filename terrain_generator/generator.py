# terrain_generator/generator.py

"""
================================================================================
CORE TERRAIN GENERATOR
================================================================================
This module contains the main TerrainGenerator class, responsible for running
the terrain pipeline once and handing back the height and color textures.

    RandomSource -> height strategy -> HeightGrid -> colorizer -> ColorGrid
                 -> linearizer -> height/color buffers

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict): A dictionary of parameters which can override the
      internal defaults. Expected keys include 'seed', 'texture_width', etc.
    - logger: A configured Python logging object for runtime messages.
- Outputs (from generate()):
    - A TerrainMaps bundle of read-only NumPy arrays.
- Side Effects: Logs messages using the provided logger.
- Invariants: Given the same seed and configuration, the output is
  bit-identical. Invalid configuration is rejected in __init__, before any
  grid is allocated.
================================================================================
"""

import logging
import time
from dataclasses import dataclass, field

import numpy as np

from . import accretion
from . import color_maps
from . import config as DEFAULTS
from . import legacy
from .analysis import terrain_statistics
from .exceptions import ConfigurationError
from .linearize import linearize
from .random_source import RandomSource
from .validation import (
    validate_accretion_parameters, validate_bands, validate_dimensions, validate_jitter,
    validate_pyramid_parameters,
)


@dataclass(frozen=True)
class TerrainMaps:
    """The read-only result of one generation run."""
    width: int
    height: int
    seed: int
    strategy: str
    height_grid: np.ndarray
    color_grid: np.ndarray
    height_buffer: np.ndarray
    color_buffer: np.ndarray
    stats: dict = field(default_factory=dict)


def _accretion_strategy(settings: dict, rng: RandomSource) -> np.ndarray:
    return accretion.generate(
        settings['texture_width'], settings['texture_height'],
        settings['seed_centers'], settings['step_size'], settings['splat_radius'],
        settings['iterations'], settings['margin_width'], rng,
        noise_ceiling=settings['noise_ceiling'],
    )


def _pyramid_strategy(settings: dict, rng: RandomSource) -> np.ndarray:
    return legacy.generate_pyramid(
        settings['texture_width'], settings['texture_height'], rng,
        plain_ceiling=settings['pyramid_plain_ceiling'],
        center=settings['pyramid_center'],
        side=settings['pyramid_side'],
        brick_height=settings['pyramid_brick_height'],
        step=settings['pyramid_step'],
    )


# Height generation strategies, selected by the 'generation_strategy' setting.
STRATEGIES = {
    'accretion': _accretion_strategy,
    'pyramid': _pyramid_strategy,
}


def _as_tuple(value):
    """Tuples list-like config values; anything else is left for validation to reject."""
    return tuple(value) if isinstance(value, (list, tuple)) else value


def _freeze(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


class TerrainGenerator:
    """
    Generates the height and color textures for a terrain.
    This class is backend-only and does not handle any visualization.
    """
    def __init__(self, config: dict, logger: logging.Logger = None):
        """
        Initializes the terrain generator.

        Args:
            config (dict): User-defined parameters to override defaults.
            logger (logging.Logger): The logger instance for all output.

        Raises:
            ConfigurationError: If any setting is invalid.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.user_config = config or {}
        self.logger.info("TerrainGenerator initializing...")

        # --- Consolidate Configuration ---
        self.settings = {
            'seed': self.user_config.get('seed', DEFAULTS.DEFAULT_SEED),
            'texture_width': self.user_config.get('texture_width', DEFAULTS.DEFAULT_TEXTURE_WIDTH),
            'texture_height': self.user_config.get('texture_height', DEFAULTS.DEFAULT_TEXTURE_HEIGHT),
            'generation_strategy': self.user_config.get('generation_strategy', DEFAULTS.GENERATION_STRATEGY),

            'step_size': self.user_config.get('step_size', DEFAULTS.STEP_SIZE),
            'splat_radius': self.user_config.get('splat_radius', DEFAULTS.SPLAT_RADIUS),
            'iterations': self.user_config.get('iterations', DEFAULTS.ITERATIONS),
            'seed_centers': [_as_tuple(c) for c in self.user_config.get('seed_centers', DEFAULTS.SEED_CENTERS)],
            'margin_width': self.user_config.get('margin_width', DEFAULTS.MARGIN_WIDTH),
            'noise_ceiling': self.user_config.get('noise_ceiling', DEFAULTS.NOISE_CEILING),

            'pyramid_plain_ceiling': self.user_config.get('pyramid_plain_ceiling', DEFAULTS.PYRAMID_PLAIN_CEILING),
            'pyramid_center': _as_tuple(self.user_config.get('pyramid_center', DEFAULTS.PYRAMID_CENTER)),
            'pyramid_side': self.user_config.get('pyramid_side', DEFAULTS.PYRAMID_SIDE),
            'pyramid_brick_height': self.user_config.get('pyramid_brick_height', DEFAULTS.PYRAMID_BRICK_HEIGHT),
            'pyramid_step': self.user_config.get('pyramid_step', DEFAULTS.PYRAMID_STEP),

            'grass_threshold': self.user_config.get('grass_threshold', DEFAULTS.GRASS_THRESHOLD),
            'band_thresholds': [tuple(b) for b in self.user_config.get('band_thresholds', DEFAULTS.BAND_THRESHOLDS)],
            'top_band': self.user_config.get('top_band', DEFAULTS.TOP_BAND),
            'jitter_max': self.user_config.get('jitter_max', DEFAULTS.JITTER_MAX),
            'include_alpha': self.user_config.get('include_alpha', DEFAULTS.INCLUDE_ALPHA),
        }

        # --- Validate everything before anything is allocated ---
        self._validate()

        self.width = self.settings['texture_width']
        self.height = self.settings['texture_height']
        self.strategy = self.settings['generation_strategy']

        self.logger.info(
            f"TerrainGenerator initialized: {self.width}x{self.height} texture, "
            f"strategy '{self.strategy}', seed: {self.settings['seed']}"
        )

    def _validate(self):
        s = self.settings
        strategy = s['generation_strategy']
        if strategy not in STRATEGIES:
            raise ConfigurationError(
                f"Unknown generation_strategy '{strategy}'. Choose from: {sorted(STRATEGIES)}"
            )
        validate_dimensions(s['texture_width'], s['texture_height'])
        if strategy == 'accretion':
            validate_accretion_parameters(
                s['texture_width'], s['texture_height'], s['seed_centers'],
                s['step_size'], s['splat_radius'], s['iterations'],
                s['margin_width'], s['noise_ceiling'],
            )
        elif strategy == 'pyramid':
            validate_pyramid_parameters(
                s['texture_width'], s['texture_height'], s['pyramid_plain_ceiling'],
                s['pyramid_center'], s['pyramid_side'], s['pyramid_brick_height'],
                s['pyramid_step'],
            )
        validate_bands(s['grass_threshold'], s['band_thresholds'])
        validate_jitter(s['jitter_max'])
        # Resolves band names; raises on unknown colors.
        color_maps.create_band_color_lut(s['band_thresholds'], s['top_band'])

    def generate(self) -> TerrainMaps:
        """
        Runs the full pipeline once. Each call uses a fresh RandomSource built
        from the configured seed and allocates new grids.
        """
        start_time = time.perf_counter()
        rng = RandomSource(self.settings['seed'])
        self.logger.debug(f"Using {rng!r}")

        # 1. Height field.
        height_grid = STRATEGIES[self.strategy](self.settings, rng)
        height_time = time.perf_counter()
        self.logger.info(f"Height grid generated in {height_time - start_time:.2f} seconds.")

        # 2. Color field.
        color_grid = color_maps.colorize(
            height_grid,
            self.settings['grass_threshold'],
            self.settings['band_thresholds'],
            rng,
            jitter_max=self.settings['jitter_max'],
            include_alpha=self.settings['include_alpha'],
            top_band=self.settings['top_band'],
        )

        # 3. Flat buffers for texture upload.
        height_pixels = color_maps.get_height_color_array(height_grid, self.settings['include_alpha'])
        height_buffer = linearize(height_pixels, self.width, self.height)
        color_buffer = linearize(color_grid, self.width, self.height)

        margin = self.settings['margin_width'] if self.strategy == 'accretion' else None
        stats = terrain_statistics(height_grid, margin_width=margin)
        self.logger.info(
            f"Terrain covers {stats['covered_cells']} cells "
            f"({stats['coverage_fraction'] * 100:.1f}%) in {stats['blob_count']} blob(s), "
            f"max height {stats['max_height']}."
        )
        self.logger.info(f"Terrain generation complete in {time.perf_counter() - start_time:.2f} seconds.")

        return TerrainMaps(
            width=self.width,
            height=self.height,
            seed=rng.seed,
            strategy=self.strategy,
            height_grid=_freeze(height_grid),
            color_grid=_freeze(color_grid),
            height_buffer=_freeze(height_buffer),
            color_buffer=_freeze(color_buffer),
            stats=stats,
        )
