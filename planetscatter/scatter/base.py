from __future__ import annotations
import numbers
from typing import List, Protocol

from ..core.placement import PlacementTransform
from ..core.sphere import POLE_MAPPINGS
from ..errors import InvalidConfiguration

class Scatterer(Protocol):
    def scatter(self) -> List[PlacementTransform]: ...


def is_count(value: object) -> bool:
    """True for a plain integer (bools and floats rejected)."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_common(radius: float, scale_min: float, scale_max: float, pole_mapping: str) -> None:
    if not radius > 0.0:
        raise InvalidConfiguration("radius must be positive.")
    if scale_max < scale_min:
        raise InvalidConfiguration(f"scale_max ({scale_max}) must be >= scale_min ({scale_min}).")
    if scale_min <= 0.0:
        raise InvalidConfiguration("scale_min must be positive.")
    if pole_mapping not in POLE_MAPPINGS:
        raise InvalidConfiguration(f"pole_mapping must be one of {sorted(POLE_MAPPINGS)}.")
