from .group import Instance, PlanetGroup
from .loader import AssetLoader, DecorationAsset, load_asset

__all__ = ["AssetLoader", "DecorationAsset", "Instance", "PlanetGroup", "load_asset"]
