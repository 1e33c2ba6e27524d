# terrain_generator/runtime/terrain.py

"""
================================================================================
TERRAIN RUNTIME
================================================================================
The read-only query surface world logic uses once the textures exist. It
answers height lookups at integer grid coordinates only; smoothing heights
for fractional world positions is left to the caller.
================================================================================
"""
import logging

import numpy as np

from ..generator import TerrainMaps


class Terrain:
    """Integer surface-height lookups over a generated height grid."""

    def __init__(self, maps: TerrainMaps, spacing: int = 1):
        """
        Args:
            maps (TerrainMaps): The generated terrain.
            spacing (int): World units between adjacent grid vertices.
        """
        if spacing < 1:
            raise ValueError(f"spacing must be at least 1, got {spacing}")
        self.maps = maps
        self.spacing = spacing
        self.width = maps.width
        self.height = maps.height
        self.logger = logging.getLogger(__name__)
        self.logger.info(f"Terrain ready: {self.width}x{self.height} grid, spacing {spacing}.")

    @property
    def size(self) -> tuple[int, int]:
        """Extent of the terrain in world units."""
        return self.width * self.spacing, self.height * self.spacing

    def in_bounds(self, x: int, z: int) -> bool:
        return 0 <= x < self.width and 0 <= z < self.height

    def surface_height(self, x: int, z: int) -> int:
        """
        Returns the stored height at grid coordinates (x, z).

        Raises:
            IndexError: If (x, z) lies outside the grid.
        """
        if not self.in_bounds(x, z):
            raise IndexError(f"Grid coordinate ({x}, {z}) outside {self.width}x{self.height} terrain")
        return int(self.maps.height_grid[x, z])

    def surface_height_at_world(self, world_x: float, world_z: float) -> int:
        """Height of the grid vertex at or below a world position (no interpolation)."""
        return self.surface_height(int(world_x // self.spacing), int(world_z // self.spacing))

    def color_at(self, x: int, z: int) -> tuple:
        if not self.in_bounds(x, z):
            raise IndexError(f"Grid coordinate ({x}, {z}) outside {self.width}x{self.height} terrain")
        return tuple(int(c) for c in self.maps.color_grid[x, z])

    def height_profile(self, z: int) -> np.ndarray:
        """All heights along the row at depth z, as a new array."""
        if not 0 <= z < self.height:
            raise IndexError(f"Row {z} outside terrain of height {self.height}")
        return np.array(self.maps.height_grid[:, z], copy=True)
