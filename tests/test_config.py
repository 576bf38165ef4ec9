from __future__ import annotations

from pathlib import Path

import pytest

from grid_rover.config import SimConfig, load_yaml
from grid_rover.errors import InvalidConfiguration, InvalidInitialPlacement
from grid_rover.heading import Heading, RoverState

CONFIG_PATH = Path(__file__).resolve().parents[1] / "configs" / "sim.yaml"


def test_default_config_builds_reference_rover() -> None:
    cfg = SimConfig.from_yaml(str(CONFIG_PATH))

    assert (cfg.grid_width, cfg.grid_height) == (10, 10)
    assert cfg.start_heading is Heading.NORTH
    assert cfg.obstacles == [(2, 2), (3, 5)]
    assert cfg.commands == "FFRFLF"

    rover = cfg.build_rover()
    assert rover.get_state() == RoverState(0, 0, Heading.NORTH)
    assert rover.obstacles.occupies(3, 5)


def test_missing_section_raises_invalid_configuration() -> None:
    cfg = load_yaml(str(CONFIG_PATH))
    del cfg["rover"]
    with pytest.raises(InvalidConfiguration):
        SimConfig.from_dict(cfg)


def test_bad_grid_and_start_are_reported_at_build_time() -> None:
    cfg = load_yaml(str(CONFIG_PATH))

    cfg["grid"]["width"] = 0
    with pytest.raises(InvalidConfiguration):
        SimConfig.from_dict(cfg).build_rover()

    cfg["grid"]["width"] = 10
    cfg["rover"].update({"x": 2, "y": 2})
    with pytest.raises(InvalidInitialPlacement):
        SimConfig.from_dict(cfg).build_rover()


def test_non_numeric_dimension_raises_invalid_configuration() -> None:
    cfg = load_yaml(str(CONFIG_PATH))
    cfg["grid"]["width"] = "ten"
    with pytest.raises(InvalidConfiguration):
        SimConfig.from_dict(cfg)


def test_null_optional_sections_fall_back_to_defaults() -> None:
    cfg = load_yaml(str(CONFIG_PATH))
    cfg["env"] = None
    cfg["render"] = None
    cfg["obstacles"] = None

    sim_cfg = SimConfig.from_dict(cfg)

    assert sim_cfg.env.max_steps == 100
    assert sim_cfg.render.cell_size == 48
    assert sim_cfg.obstacles == []


def test_null_required_section_raises_invalid_configuration() -> None:
    cfg = load_yaml(str(CONFIG_PATH))
    cfg["grid"] = None
    with pytest.raises(InvalidConfiguration):
        SimConfig.from_dict(cfg)


def test_unreadable_or_broken_yaml_raises_invalid_configuration(tmp_path) -> None:
    with pytest.raises(InvalidConfiguration):
        load_yaml(str(tmp_path / "missing.yaml"))

    broken = tmp_path / "broken.yaml"
    broken.write_text("grid: [width: 10\n", encoding="utf-8")
    with pytest.raises(InvalidConfiguration):
        SimConfig.from_yaml(str(broken))
