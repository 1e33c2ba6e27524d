# terrain_generator/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the terrain
generator. These values are used if they are not explicitly provided by the
user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC TERRAIN.
Instead, pass a configuration dictionary to the TerrainGenerator instance.
================================================================================
"""

# --- Random Source ---
# None means "draw a fresh seed from the OS"; the resolved seed is logged
# and recorded in the generated maps so a run can be reproduced.
DEFAULT_SEED = None

# --- Texture Dimensions ---
# Textures should be powers of two for mipmapping.
DEFAULT_TEXTURE_WIDTH = 512
DEFAULT_TEXTURE_HEIGHT = 512

# --- Generation Strategy ---
# 'accretion': random-walk splatting around the seed centers.
# 'pyramid':   the legacy grass plain with a stepped pyramid.
GENERATION_STRATEGY = 'accretion'

# --- Accretion Walk ---
# Distance the walker moves along each axis per iteration.
STEP_SIZE = 3
# Cells within this Euclidean distance of the walker gain one unit of height.
SPLAT_RADIUS = 24
ITERATIONS = 10000
# Restart anchors for the walker, as (x, z) grid coordinates.
SEED_CENTERS = [(400, 400), (100, 100), (400, 100)]
# Width of the border the walker may not enter. Must be at least
# SPLAT_RADIUS + STEP_SIZE, otherwise a walker could splat a full radius
# into the border before being reset.
MARGIN_WIDTH = 50
# Cells never touched by the walk get a value drawn from [0, NOISE_CEILING).
# A ceiling of 1 keeps them at exactly 0.
NOISE_CEILING = 1

# --- Legacy Pyramid Strategy ---
PYRAMID_PLAIN_CEILING = 3 # Plain heights are drawn from [0, 3)
PYRAMID_CENTER = (128, 128)
PYRAMID_SIDE = 100
PYRAMID_BRICK_HEIGHT = 20
PYRAMID_STEP = 5

# --- Colorization ---
# Heights below this value are painted with one of the grass variants.
GRASS_THRESHOLD = 5
# Ordered (exclusive upper bound, band name) pairs. Heights at or above the
# last bound fall into the final catch-all band.
BAND_THRESHOLDS = [
    (50, "brown"),
    (90, "tan"),
    (130, "dark_gray"),
    (170, "light_gray"),
]
TOP_BAND = "white"
# Maximum color noise, in normalized [0, 1] channel units.
JITTER_MAX = 1.0 / 20.0
# Emit RGBA textures (alpha fixed at full opacity) instead of RGB.
INCLUDE_ALPHA = False

# --- Output ---
HEIGHT_TEXTURE_FILENAME = "heightTexture.png"
COLOR_TEXTURE_FILENAME = "colorTexture.png"
GENERATION_CONFIG_FILENAME = "generation_config.json"
