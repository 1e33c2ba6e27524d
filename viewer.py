# viewer.py

"""
================================================================================
TERRAIN TEXTURE VIEWER
================================================================================
Generates a terrain and shows its textures in a Pygame window.

Controls:
    T       Toggle between the color texture and the height texture.
    R       Regenerate the terrain with the next seed.
    Escape  Quit.

Usage:
    python viewer.py [--config path/to/config.json]
================================================================================
"""
import argparse
import json
import logging
import sys

import pygame

from terrain_generator.exceptions import ConfigurationError
from terrain_generator.generator import TerrainGenerator, TerrainMaps

BACKGROUND_COLOR = (255, 255, 255)


def make_surface(pixels) -> pygame.Surface:
    """Builds a surface from an [x, z] RGB(A) array. Pygame's surfarray is also [x, y]."""
    return pygame.surfarray.make_surface(pixels[..., :3])


class ViewerApp:
    """The main application class for the terrain viewer."""
    def __init__(self, config: dict):
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        self.logger = logging.getLogger(__name__)
        self.config = dict(config)

        self.generator = TerrainGenerator(self.config, self.logger)
        self.maps = self.generator.generate()

        self.logger.info("Initializing Pygame...")
        pygame.init()
        self.screen = pygame.display.set_mode((self.maps.width, self.maps.height))
        self.clock = pygame.time.Clock()
        self.is_running = True

        # Display toggle; the color texture is shown first.
        self.show_height = False
        self._load_surfaces(self.maps)

    def _load_surfaces(self, maps: TerrainMaps):
        height_pixels = maps.height_buffer.reshape((maps.width, maps.height, -1))
        color_pixels = maps.color_buffer.reshape((maps.width, maps.height, -1))
        self.height_surface = make_surface(height_pixels)
        self.color_surface = make_surface(color_pixels)

    def regenerate(self):
        """Replaces the current terrain wholesale with one from the next seed."""
        self.config['seed'] = self.maps.seed + 1
        self.generator = TerrainGenerator(self.config, self.logger)
        self.maps = self.generator.generate()
        self._load_surfaces(self.maps)

    def run(self):
        """The main application loop."""
        while self.is_running:
            self.handle_events()
            self.draw()
            self.clock.tick(30)

        self.logger.info("Exiting viewer.")
        pygame.quit()

    def handle_events(self):
        """Processes user input and other events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.is_running = False
                elif event.key == pygame.K_t:
                    self.show_height = not self.show_height
                elif event.key == pygame.K_r:
                    self.regenerate()

    def draw(self):
        """Handles all rendering for the application."""
        self.screen.fill(BACKGROUND_COLOR)
        surface = self.height_surface if self.show_height else self.color_surface
        self.screen.blit(surface, (0, 0))

        mode = "height" if self.show_height else "color"
        pygame.display.set_caption(
            f"Terrain Maps {self.maps.width} by {self.maps.height} | {mode} | "
            f"seed {self.maps.seed} | 't' to toggle"
        )
        pygame.display.flip()


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="View generated terrain textures.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON configuration file.")
    args = parser.parse_args()

    config = {}
    if args.config:
        with open(args.config, 'r') as f:
            config = json.load(f).get('terrain_generation_parameters', {})

    try:
        app = ViewerApp(config)
    except ConfigurationError as e:
        print(f"Error: invalid terrain configuration: {e}")
        sys.exit(2)
    app.run()
