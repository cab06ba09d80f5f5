from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CameraZoom:
    """Entry animation lowering the camera from ``start_y`` to the equator.

    Cubic ease-out over ``duration_ms``.
    """

    start_y: float = 400.0
    duration_ms: float = 2500.0

    def __post_init__(self) -> None:
        if self.duration_ms <= 0.0:
            raise ValueError("duration_ms must be positive.")

    def progress(self, elapsed_ms: float) -> float:
        return min(max(elapsed_ms / self.duration_ms, 0.0), 1.0)

    def height_at(self, elapsed_ms: float) -> float:
        p = self.progress(elapsed_ms)
        eased = 1.0 - (1.0 - p) ** 3
        return self.start_y * (1.0 - eased)

    def finished(self, elapsed_ms: float) -> bool:
        return self.progress(elapsed_ms) >= 1.0
