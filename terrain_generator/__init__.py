# terrain_generator/__init__.py

from .exceptions import ConfigurationError, PersistenceError
from .generator import TerrainGenerator, TerrainMaps
from .random_source import RandomSource

__all__ = [
    "ConfigurationError",
    "PersistenceError",
    "RandomSource",
    "TerrainGenerator",
    "TerrainMaps",
]
