# terrain_generator/persistence.py

"""
================================================================================
TEXTURE PERSISTENCE
================================================================================
Writes linearized texture buffers to PNG files with Pillow. This is a sink,
not a pipeline stage: a failure here is reported as a PersistenceError and
never touches the already-generated maps.
================================================================================
"""
import json
import logging
import os

import numpy as np
from PIL import Image

from . import config as DEFAULTS
from .exceptions import PersistenceError
from .linearize import delinearize

logger = logging.getLogger(__name__)

_MODES_BY_CHANNELS = {3: 'RGB', 4: 'RGBA'}


def save_texture(buffer: np.ndarray, width: int, height: int, path: str) -> str:
    """
    Saves a linearized RGB or RGBA buffer as a PNG image.

    Raises:
        PersistenceError: If the buffer cannot be encoded or the file written.
    """
    grid = delinearize(np.asarray(buffer, dtype=np.uint8), width, height)
    channels = grid.shape[2] if grid.ndim == 3 else 0
    mode = _MODES_BY_CHANNELS.get(channels)
    if mode is None:
        raise PersistenceError(f"Cannot encode a buffer with {channels} channels as PNG")

    # Pillow works with (height, width, channels) arrays, so the [x, z] grid
    # is transposed to put z on the rows.
    img_data = np.ascontiguousarray(np.transpose(grid, (1, 0, 2)))
    try:
        img = Image.fromarray(img_data)
        img.save(path, 'PNG')
    except (OSError, ValueError) as e:
        raise PersistenceError(f"Failed to write texture '{path}': {e}") from e

    logger.debug(f"Saved {width}x{height} {mode} texture to '{path}'")
    return path


def save_terrain_maps(maps, output_dir: str, settings: dict = None) -> dict:
    """
    Saves the height and color textures, plus a generation_config.json
    record of the settings that produced them, to output_dir.

    Returns:
        dict: The paths written, keyed by 'height', 'color' and 'config'.
    """
    try:
        os.makedirs(output_dir, exist_ok=True)
    except OSError as e:
        raise PersistenceError(f"Failed to create output directory '{output_dir}': {e}") from e

    paths = {
        'height': os.path.join(output_dir, DEFAULTS.HEIGHT_TEXTURE_FILENAME),
        'color': os.path.join(output_dir, DEFAULTS.COLOR_TEXTURE_FILENAME),
        'config': os.path.join(output_dir, DEFAULTS.GENERATION_CONFIG_FILENAME),
    }
    save_texture(maps.height_buffer, maps.width, maps.height, paths['height'])
    save_texture(maps.color_buffer, maps.width, maps.height, paths['color'])

    # The "birth certificate" of this terrain.
    record = dict(settings or {})
    record['seed'] = maps.seed
    record['generation_strategy'] = maps.strategy
    try:
        with open(paths['config'], 'w') as f:
            json.dump(record, f, indent=4)
    except (OSError, TypeError) as e:
        raise PersistenceError(f"Failed to write generation config '{paths['config']}': {e}") from e

    logger.info(f"Terrain textures saved to '{output_dir}'")
    return paths
