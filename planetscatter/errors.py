"""Exception types raised by planetscatter."""

from __future__ import annotations


class PlanetScatterError(Exception):
    """Base class for planetscatter errors."""


class InvalidConfiguration(PlanetScatterError, ValueError):
    """A scatterer or zone was built from parameters it cannot honour.

    Raised at construction time so that no partial scatter is ever produced.
    """
