from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Optional, Union, List

import yaml
from pydantic import BaseModel, Field, model_validator

PoleMappingName = Literal["poles", "legacy"]


class PlanetSettings(BaseModel):
    radius: float = Field(250.0, gt=0.0)
    segments: int = Field(15, gt=2)
    pole_mapping: PoleMappingName = "poles"


class ExclusionZoneConfig(BaseModel):
    name: Optional[str] = None
    lat: float
    lon: float
    radius: float = Field(ge=0.0)


class ClusterCenterConfig(BaseModel):
    lat: float
    lon: float


class StreakLayerConfig(BaseModel):
    kind: Literal["streak"]
    name: str
    asset: Optional[Path] = None
    lat_segments: int = 20
    lon_segments: int = 35
    noise_scale: float = 2.5
    threshold: float = 0.25
    jitter: float = 0.15
    scale_min: float = 0.2
    scale_max: float = 0.4
    exclusion_zones: List[ExclusionZoneConfig] = Field(default_factory=list)


class ClusterLayerConfig(BaseModel):
    kind: Literal["cluster"]
    name: str
    asset: Optional[Path] = None
    clusters: List[ClusterCenterConfig]
    count: int = 25
    spread: float = 0.05
    scale_min: float = 0.8
    scale_max: float = 1.2


class FixedLayerConfig(BaseModel):
    kind: Literal["fixed"]
    name: str
    asset: Optional[Path] = None
    lat: float
    lon: float
    scale: float = 1.0
    normal_offset: float = 0.0
    local_shift: tuple[float, float, float] = (0.0, 0.0, 0.0)


LayerConfig = Annotated[
    Union[StreakLayerConfig, ClusterLayerConfig, FixedLayerConfig],
    Field(discriminator="kind"),
]


class OutputConfig(BaseModel):
    path: Path
    format: Literal["json", "npz", "ply"] = "json"


class PlanetConfig(BaseModel):
    planet: PlanetSettings = PlanetSettings()
    layers: List[LayerConfig] = Field(default_factory=list)
    output: OutputConfig = Field(default_factory=lambda: OutputConfig(path=Path("placements.json")))

    @model_validator(mode="after")
    def _unique_layer_names(self) -> "PlanetConfig":
        seen: set[str] = set()
        for layer in self.layers:
            if layer.name in seen:
                raise ValueError(f"Duplicate layer name '{layer.name}'")
            seen.add(layer.name)
        return self


def default_config() -> PlanetConfig:
    """The demo planet: grass streaks around a pond, ten wheat fields, animals and a barn."""
    pond = {"name": "pond", "lat": -0.4, "lon": 0.5, "radius": 0.35}
    wheat_centers = [
        (0.2, 0.0), (-0.3, 0.3), (0.5, -0.4), (-0.6, -0.3), (0.1, 0.6),
        (0.7, 0.2), (-0.2, -0.5), (0.4, 0.4), (-0.5, 0.1), (0.6, -0.2),
    ]
    layers = [
        {"kind": "streak", "name": "grass", "asset": "assets/grass/grass_variations.glb",
         "exclusion_zones": [pond]},
        {"kind": "cluster", "name": "wheat", "asset": "wheatFour.glb",
         "clusters": [{"lat": lat, "lon": lon} for lat, lon in wheat_centers]},
        {"kind": "fixed", "name": "pond", "asset": "assets/water-pond/pond.glb",
         "lat": -0.4, "lon": 0.5, "scale": 50.0, "normal_offset": 1.0, "local_shift": (-30.0, 0.0, 0.0)},
        {"kind": "fixed", "name": "duck_1", "asset": "assets/animals/dave-duck.glb",
         "lat": -0.4, "lon": 0.55, "scale": 15.0, "normal_offset": 0.1},
        {"kind": "fixed", "name": "duck_2", "asset": "assets/animals/dave-duck.glb",
         "lat": -0.42, "lon": 0.48, "scale": 14.0, "normal_offset": 0.1},
        {"kind": "fixed", "name": "duck_3", "asset": "assets/animals/dave-duck.glb",
         "lat": -0.38, "lon": 0.52, "scale": 16.0, "normal_offset": -0.5},
        {"kind": "fixed", "name": "duck_4", "asset": "assets/animals/dave-duck.glb",
         "lat": -0.5, "lon": 0.7, "scale": 13.0, "normal_offset": 0.1},
        {"kind": "fixed", "name": "cow", "asset": "assets/animals/Cow.glb",
         "lat": 0.2, "lon": 0.1, "scale": 3000.0, "normal_offset": -2.0},
        {"kind": "fixed", "name": "barn", "asset": "assets/low-poly_barn.glb",
         "lat": 0.25, "lon": -0.05, "scale": 5.0, "normal_offset": 0.1},
    ]
    return PlanetConfig.model_validate({"layers": layers})


def load_config(path: str | Path) -> PlanetConfig:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError("Configuration root must be a mapping.")
    cfg = PlanetConfig.model_validate(data)
    cfg.output.path = (path.parent / cfg.output.path).resolve()
    for layer in cfg.layers:
        if layer.asset is not None and not layer.asset.is_absolute():
            layer.asset = (path.parent / layer.asset).resolve()
    return cfg
