# bake_terrain.py

"""
================================================================================
OFFLINE TERRAIN BAKER SCRIPT
================================================================================
This script is a command-line tool for generating a terrain's height and
color textures and saving them as PNG files ("baking"), together with a
generation_config.json record of the settings used.

Usage:
    python bake_terrain.py --config path/to/your/config.json --output baked_terrain
================================================================================
"""
import argparse
import json
import logging
import os
import sys

# Add project root to Python path to allow importing from terrain_generator
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from terrain_generator.exceptions import ConfigurationError, PersistenceError
from terrain_generator.generator import TerrainGenerator
from terrain_generator.persistence import save_terrain_maps


def load_config(config_path: str) -> dict:
    """Reads the 'terrain_generation_parameters' section of a JSON config file."""
    with open(config_path, 'r') as f:
        config = json.load(f)
    return config.get('terrain_generation_parameters', {})


def bake_terrain(config: dict, output_dir: str, logger: logging.Logger) -> int:
    """
    Generates a terrain and saves its textures. Returns a process exit code:
    0 on success, 1 if the textures could not be saved, 2 on bad configuration.
    """
    try:
        generator = TerrainGenerator(config=config, logger=logger)
    except ConfigurationError as e:
        logger.critical(f"Invalid terrain configuration: {e}")
        return 2

    maps = generator.generate()

    try:
        paths = save_terrain_maps(maps, output_dir, generator.settings)
    except PersistenceError as e:
        # The terrain itself is fine; only the files are missing.
        logger.error(f"Terrain generated (seed {maps.seed}) but could not be saved: {e}")
        return 1

    logger.info(f"Height texture: {paths['height']}")
    logger.info(f"Color texture:  {paths['color']}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Offline baker for accretion terrain textures.")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON configuration file. Defaults are used if omitted."
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output directory. Defaults to baked_terrains/seed_<seed>."
    )
    parser.add_argument("--seed", type=int, default=None, help="Override the configured seed.")
    parser.add_argument(
        "--strategy",
        choices=["accretion", "pyramid"],
        default=None,
        help="Override the configured generation strategy."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    logger = logging.getLogger("Baker")

    config = {}
    if args.config:
        logger.info(f"Loading configuration from: {args.config}")
        try:
            config = load_config(args.config)
        except (FileNotFoundError, json.JSONDecodeError) as e:
            logger.critical(f"Failed to load or parse config file: {e}")
            return 2

    if args.seed is not None:
        config['seed'] = args.seed
    if args.strategy is not None:
        config['generation_strategy'] = args.strategy

    output_dir = args.output or f"baked_terrains/seed_{config.get('seed', 'random')}"
    return bake_terrain(config, output_dir, logger)


# --- Command-Line Interface ---
if __name__ == "__main__":
    sys.exit(main())
