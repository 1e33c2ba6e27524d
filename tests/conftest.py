"""
Shared fixtures for the terrain generator tests.
"""

import logging

import pytest


@pytest.fixture
def logger():
    return logging.getLogger("terrain_generator.tests")


@pytest.fixture
def small_config():
    """A 64x64 accretion terrain that generates in milliseconds."""
    return {
        'seed': 1234,
        'texture_width': 64,
        'texture_height': 64,
        'step_size': 1,
        'splat_radius': 4,
        'iterations': 500,
        'seed_centers': [(32, 32), (20, 40)],
        'margin_width': 8,
    }
