import json

import pytest

from maze_explorer.errors import MazeConfigError
from maze_explorer.params import Parameters


def test_update_coerces_types():
    params = Parameters()
    params.update(maze_width="9", loop_density="0.25", seed=7)
    assert params.maze_width == 9
    assert params.loop_density == 0.25
    assert params.seed == 7


def test_update_ignores_bad_and_unknown_values():
    params = Parameters()
    params.update(maze_width="wide", colour="red")
    assert params.maze_width == Parameters().maze_width
    assert not hasattr(params, "colour")


def test_negative_seed_means_fresh_entropy():
    assert Parameters(seed=-1).rng_seed is None
    assert Parameters(seed=3).rng_seed == 3


@pytest.mark.parametrize(
    "overrides",
    [
        {"maze_width": 1},
        {"maze_height": 0},
        {"loop_density": 1.2},
        {"max_steps": 0},
        {"tick_hz": 0},
        {"junction_capacity": 0},
        {"stats_interval": 0},
    ],
)
def test_validate_rejects(overrides):
    with pytest.raises(MazeConfigError):
        Parameters(**overrides).validate()


def test_defaults_are_valid():
    Parameters().validate()


def test_save_and_load(tmp_path):
    path = tmp_path / "params.json"
    Parameters(maze_width=5, seed=11).save(path)

    assert json.loads(path.read_text())["maze_width"] == 5
    loaded = Parameters.load(path)
    assert loaded.maze_width == 5
    assert loaded.seed == 11


def test_load_missing_or_corrupt_file_gives_defaults(tmp_path):
    assert Parameters.load(tmp_path / "absent.json") == Parameters()

    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{not json")
    assert Parameters.load(corrupt) == Parameters()
