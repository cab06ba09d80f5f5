from pathlib import Path

import numpy as np
import pytest
import trimesh

from planetscatter.assets import AssetLoader, load_asset
from planetscatter.config.schema import PlanetConfig
from planetscatter.sdk import build_planet


@pytest.fixture()
def box_path(tmp_path: Path) -> Path:
    path = tmp_path / "crate.ply"
    trimesh.creation.box(extents=(2.0, 2.0, 2.0)).export(str(path))
    return path


def test_load_asset_reads_mesh(box_path: Path) -> None:
    asset = load_asset(box_path)
    assert asset.name == "crate"
    assert asset.faces.shape[1] == 3
    np.testing.assert_allclose(asset.bounds(), (-1.0, 1.0, -1.0, 1.0, -1.0, 1.0), atol=1e-6)


def test_loader_returns_cached_future(box_path: Path) -> None:
    with AssetLoader(max_workers=2) as loader:
        first = loader.load(box_path)
        second = loader.load(str(box_path))
        assert first is second
        asset = first.result(timeout=30)
    assert len(asset.vertices) == 8


def test_loader_surfaces_missing_file(tmp_path: Path) -> None:
    with AssetLoader() as loader:
        fut = loader.load(tmp_path / "missing.glb")
        with pytest.raises(Exception):
            fut.result(timeout=30)


def test_build_planet_attaches_assets(box_path: Path) -> None:
    cfg = PlanetConfig.model_validate(
        {
            "planet": {"radius": 50.0},
            "layers": [
                {"kind": "fixed", "name": "barn", "asset": str(box_path), "lat": 0.25, "lon": -0.05},
                {"kind": "cluster", "name": "wheat", "clusters": [{"lat": 0.2, "lon": 0.0}], "count": 5},
            ],
        }
    )
    with AssetLoader() as loader:
        group = build_planet(cfg, loader=loader)
    assert group.radius == 50.0
    assert len(group.instances) == 6
    barn = group.layer("barn")
    assert len(barn) == 1 and barn[0].asset is not None
    assert barn[0].asset.name == "crate"
    assert all(inst.asset is None for inst in group.layer("wheat"))


def test_build_planet_without_loader_has_no_assets() -> None:
    cfg = PlanetConfig.model_validate(
        {"layers": [{"kind": "fixed", "name": "barn", "asset": "barn.glb", "lat": 0.0, "lon": 0.0}]}
    )
    group = build_planet(cfg)
    assert [inst.asset for inst in group.instances] == [None]
