from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from planetscatter.config import default_config, load_config
from planetscatter.config.schema import ClusterLayerConfig, FixedLayerConfig, StreakLayerConfig

REPO_CONFIG = Path(__file__).resolve().parents[2] / "configs" / "planet.yaml"


def _write(path: Path, data: dict) -> Path:
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f)
    return path


def test_load_config_discriminates_layers_and_resolves_paths(tmp_path: Path) -> None:
    cfg_path = _write(
        tmp_path / "planet.yaml",
        {
            "planet": {"radius": 100},
            "layers": [
                {"kind": "streak", "name": "grass", "asset": "grass.glb",
                 "exclusion_zones": [{"lat": 0.0, "lon": 0.0, "radius": 0.2}]},
                {"kind": "cluster", "name": "wheat", "clusters": [{"lat": 0.1, "lon": 0.2}]},
                {"kind": "fixed", "name": "barn", "lat": 0.25, "lon": -0.05, "scale": 5},
            ],
            "output": {"path": "out/placements.npz", "format": "npz"},
        },
    )
    cfg = load_config(cfg_path)
    assert cfg.planet.radius == 100
    assert cfg.planet.pole_mapping == "poles"
    assert isinstance(cfg.layers[0], StreakLayerConfig)
    assert isinstance(cfg.layers[1], ClusterLayerConfig)
    assert isinstance(cfg.layers[2], FixedLayerConfig)
    assert cfg.layers[0].asset == (tmp_path / "grass.glb").resolve()
    assert cfg.layers[2].asset is None
    assert cfg.output.path == (tmp_path / "out" / "placements.npz").resolve()


def test_duplicate_layer_names_rejected(tmp_path: Path) -> None:
    cfg_path = _write(
        tmp_path / "dup.yaml",
        {"layers": [
            {"kind": "fixed", "name": "duck", "lat": 0, "lon": 0},
            {"kind": "fixed", "name": "duck", "lat": 0.1, "lon": 0},
        ]},
    )
    with pytest.raises(ValidationError):
        load_config(cfg_path)


def test_negative_exclusion_radius_rejected(tmp_path: Path) -> None:
    cfg_path = _write(
        tmp_path / "neg.yaml",
        {"layers": [{"kind": "streak", "name": "grass",
                     "exclusion_zones": [{"lat": 0, "lon": 0, "radius": -1}]}]},
    )
    with pytest.raises(ValidationError):
        load_config(cfg_path)


def test_unknown_layer_kind_rejected(tmp_path: Path) -> None:
    cfg_path = _write(tmp_path / "bad.yaml", {"layers": [{"kind": "spiral", "name": "x"}]})
    with pytest.raises(ValidationError):
        load_config(cfg_path)


def test_root_must_be_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_default_config_describes_demo_planet() -> None:
    cfg = default_config()
    names = [layer.name for layer in cfg.layers]
    assert names[:3] == ["grass", "wheat", "pond"]
    assert len(cfg.layers) == 9
    assert cfg.planet.radius == 250.0
    wheat = cfg.layers[1]
    assert isinstance(wheat, ClusterLayerConfig)
    assert len(wheat.clusters) == 10


def test_repository_config_loads() -> None:
    cfg = load_config(REPO_CONFIG)
    assert [layer.kind for layer in cfg.layers][:3] == ["streak", "cluster", "fixed"]
    assert cfg.output.format == "json"
