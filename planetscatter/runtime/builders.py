from __future__ import annotations

from ..config.schema import (
    ClusterLayerConfig,
    FixedLayerConfig,
    LayerConfig,
    PlanetConfig,
    PlanetSettings,
    StreakLayerConfig,
)
from ..core.exclusion import ExclusionZone, SurfaceCoordinate
from ..core.exporter import JsonWriter, NpzWriter, PlyWriter
from ..scatter.base import Scatterer
from ..scatter.cluster import ClusterConfig, ClusterScatterer
from ..scatter.fixed import FixedPlacementConfig, FixedPlacer
from ..scatter.streak import StreakConfig, StreakScatterer


def build_scatterer(layer: LayerConfig, planet: PlanetSettings) -> Scatterer:
    if layer.kind == "streak":
        assert isinstance(layer, StreakLayerConfig)
        zones = tuple(
            ExclusionZone(lat=z.lat, lon=z.lon, radius=z.radius, name=z.name)
            for z in layer.exclusion_zones
        )
        return StreakScatterer(
            StreakConfig(
                lat_segments=layer.lat_segments,
                lon_segments=layer.lon_segments,
                noise_scale=layer.noise_scale,
                threshold=layer.threshold,
                jitter=layer.jitter,
                scale_min=layer.scale_min,
                scale_max=layer.scale_max,
                radius=planet.radius,
                exclusion_zones=zones,
                pole_mapping=planet.pole_mapping,
            )
        )
    if layer.kind == "cluster":
        assert isinstance(layer, ClusterLayerConfig)
        return ClusterScatterer(
            ClusterConfig(
                clusters=tuple(SurfaceCoordinate(c.lat, c.lon) for c in layer.clusters),
                count=layer.count,
                spread=layer.spread,
                scale_min=layer.scale_min,
                scale_max=layer.scale_max,
                radius=planet.radius,
                pole_mapping=planet.pole_mapping,
            )
        )
    if layer.kind == "fixed":
        assert isinstance(layer, FixedLayerConfig)
        return FixedPlacer(
            FixedPlacementConfig(
                lat=layer.lat,
                lon=layer.lon,
                scale=layer.scale,
                normal_offset=layer.normal_offset,
                local_shift=tuple(layer.local_shift),
                radius=planet.radius,
                pole_mapping=planet.pole_mapping,
            )
        )
    raise ValueError(f"Unsupported layer kind: {layer.kind}")


def build_writer(cfg: PlanetConfig):
    out_cfg = cfg.output
    format_lower = out_cfg.format.lower()
    if format_lower == "json":
        return JsonWriter(str(out_cfg.path), radius=cfg.planet.radius)
    if format_lower == "npz":
        return NpzWriter(str(out_cfg.path))
    if format_lower == "ply":
        return PlyWriter(str(out_cfg.path))
    raise ValueError(f"Unsupported output format: {out_cfg.format}")
