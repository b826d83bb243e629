from __future__ import annotations

from pathlib import Path

import pytest

from mars_rover.config import SimConfig, load_yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "configs" / "sim.yaml"


def test_default_config_file() -> None:
    cfg = SimConfig.from_file(str(CONFIG_PATH))
    assert cfg.grid_size == 600
    assert cfg.move_step == 10.0
    assert cfg.collision_threshold == 8.0
    assert cfg.obstacle_count == 15
    assert cfg.seed is None
    assert cfg.telemetry_path is None
    assert cfg.render.graticule_lines == 10


def test_missing_sections_use_defaults() -> None:
    cfg = SimConfig.from_dict({"sim": {"move_step": 5}})
    assert cfg.move_step == 5.0
    assert cfg.grid_size == 600
    assert cfg.max_steps == 200
    assert cfg.render.fps == 30


def test_top_level_seed_is_accepted() -> None:
    assert SimConfig.from_dict({"seed": 11}).seed == 11


@pytest.mark.parametrize(
    "sim_section",
    [
        {"grid_size": 0},
        {"move_step": -1.0},
        {"move_step": 0.0},
        {"move_step": 180.5},
        {"collision_threshold": -0.5},
        {"obstacle_count": -2},
    ],
)
def test_invalid_values_rejected(sim_section) -> None:
    with pytest.raises(ValueError):
        SimConfig.from_dict({"sim": sim_section})


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_yaml(str(tmp_path / "nope.yaml"))


def test_empty_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert SimConfig.from_file(str(path)) == SimConfig()


def test_largest_step_is_accepted() -> None:
    assert SimConfig.from_dict({"sim": {"move_step": 180}}).move_step == 180.0
