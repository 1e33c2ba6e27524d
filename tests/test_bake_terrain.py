"""
Tests for the bake_terrain command-line tool.
"""

import json
import os

import pytest

import bake_terrain
from terrain_generator import config as DEFAULTS


@pytest.fixture
def config_file(tmp_path, small_config):
    path = tmp_path / "config.json"
    params = {**small_config, 'seed_centers': [list(c) for c in small_config['seed_centers']]}
    path.write_text(json.dumps({'terrain_generation_parameters': params}))
    return str(path)


class TestBakeTerrain:

    def test_bake_writes_textures(self, tmp_path, config_file):
        output = tmp_path / "baked"
        assert bake_terrain.main(["--config", config_file, "--output", str(output)]) == 0

        for name in (DEFAULTS.HEIGHT_TEXTURE_FILENAME, DEFAULTS.COLOR_TEXTURE_FILENAME,
                     DEFAULTS.GENERATION_CONFIG_FILENAME):
            assert os.path.isfile(output / name)

    def test_seed_override(self, tmp_path, config_file):
        output = tmp_path / "baked"
        assert bake_terrain.main(["--config", config_file, "--output", str(output), "--seed", "77"]) == 0
        with open(output / DEFAULTS.GENERATION_CONFIG_FILENAME) as f:
            assert json.load(f)['seed'] == 77

    def test_invalid_config_exit_code(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({'terrain_generation_parameters': {'texture_width': 300}}))
        assert bake_terrain.main(["--config", str(path), "--output", str(tmp_path / "out")]) == 2

    def test_missing_config_file(self, tmp_path):
        assert bake_terrain.main(["--config", str(tmp_path / "nope.json")]) == 2

    def test_persistence_failure_exit_code(self, tmp_path, config_file):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        assert bake_terrain.main(["--config", config_file, "--output", str(blocker)]) == 1

    def test_pyramid_that_does_not_fit_exit_code(self, tmp_path):
        path = tmp_path / "pyramid.json"
        params = {'texture_width': 128, 'texture_height': 128, 'generation_strategy': 'pyramid'}
        path.write_text(json.dumps({'terrain_generation_parameters': params}))
        output = tmp_path / "out"
        assert bake_terrain.main(["--config", str(path), "--output", str(output)]) == 2
        assert not os.path.exists(output / DEFAULTS.HEIGHT_TEXTURE_FILENAME)

    def test_non_integer_value_exit_code(self, tmp_path, small_config):
        path = tmp_path / "typo.json"
        params = {**small_config, 'seed_centers': [list(c) for c in small_config['seed_centers']],
                  'step_size': "3"}
        path.write_text(json.dumps({'terrain_generation_parameters': params}))
        assert bake_terrain.main(["--config", str(path), "--output", str(tmp_path / "out")]) == 2
