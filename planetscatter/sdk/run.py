from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ..assets.group import PlanetGroup
from ..assets.loader import AssetLoader
from ..config import PlanetConfig, load_config
from ..core.placement import InstanceBatch, PlacementTransform
from ..core.utils import get_logger
from ..runtime.builders import build_scatterer, build_writer

_log = get_logger()


@dataclass(frozen=True)
class ScatterRunResult:
    """Summary of a scatter run driven by a configuration file."""

    stats: Dict[str, int]
    output_path: Path
    config: PlanetConfig


def _resolve(config: Union[str, Path, PlanetConfig]) -> PlanetConfig:
    if isinstance(config, PlanetConfig):
        return config.model_copy(deep=True)
    return load_config(config)


def scatter_layers(cfg: PlanetConfig) -> List[Tuple[str, List[PlacementTransform]]]:
    """Run every configured layer in order."""
    results: List[Tuple[str, List[PlacementTransform]]] = []
    for layer in cfg.layers:
        transforms = build_scatterer(layer, cfg.planet).scatter()
        _log.info("Layer '%s' (%s): %d placements", layer.name, layer.kind, len(transforms))
        results.append((layer.name, transforms))
    return results


def scatter_from_config(
    config: Union[str, Path, PlanetConfig],
    *,
    output: Optional[Path] = None,
) -> ScatterRunResult:
    """Scatter every layer described by a configuration file or object.

    Parameters
    ----------
    config:
        Path to a YAML file or a pre-loaded :class:`~planetscatter.config.schema.PlanetConfig`.
    output:
        Optional override for the output file. The extension drives the format
        (``.json``, ``.npz`` or ``.ply``).

    Returns
    -------
    ScatterRunResult
        Per-layer instance counts (plus ``"total"``), the resolved output path
        and the configuration object used for the run.
    """

    cfg = _resolve(config)

    if output is not None:
        out_path = Path(output).resolve()
        ext = out_path.suffix.lower()
        if ext not in {".json", ".npz", ".ply"}:
            raise ValueError(f"Unsupported output extension '{ext}'")
        cfg.output.path = out_path
        cfg.output.format = ext.lstrip(".")
    else:
        cfg.output.path = Path(cfg.output.path).resolve()
    cfg.output.path.parent.mkdir(parents=True, exist_ok=True)

    assets = {layer.name: layer.asset for layer in cfg.layers}
    writer = build_writer(cfg)
    stats: Dict[str, int] = {}
    try:
        for name, transforms in scatter_layers(cfg):
            asset = assets[name]
            writer.write_layer(name, str(asset) if asset is not None else None, InstanceBatch.from_transforms(transforms))
            stats[name] = len(transforms)
    finally:
        writer.close()

    stats["total"] = sum(stats.values())
    return ScatterRunResult(stats=stats, output_path=Path(cfg.output.path), config=cfg)


def build_planet(
    config: Union[str, Path, PlanetConfig],
    loader: Optional[AssetLoader] = None,
) -> PlanetGroup:
    """Place every layer under one rotatable group.

    With a ``loader``, asset loads start before any scattering so mesh I/O
    overlaps with placement; each layer is attached once its mesh is ready.
    """
    cfg = _resolve(config)
    group = PlanetGroup(radius=cfg.planet.radius)

    pending: Dict[str, Future] = {}
    if loader is not None:
        for layer in cfg.layers:
            if layer.asset is not None:
                pending[layer.name] = loader.load(layer.asset)

    for name, transforms in scatter_layers(cfg):
        fut = pending.get(name)
        asset = fut.result() if fut is not None else None
        group.add_layer(name, transforms, asset)
    return group
