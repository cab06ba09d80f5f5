"""Configuration loading utilities for planetscatter."""

from .schema import (
    PlanetConfig,
    default_config,
    load_config,
)

__all__ = ["PlanetConfig", "default_config", "load_config"]
