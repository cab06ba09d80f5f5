from .run import ScatterRunResult, build_planet, scatter_from_config, scatter_layers

__all__ = ["ScatterRunResult", "build_planet", "scatter_from_config", "scatter_layers"]
