from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.sphere import Quat, quaternion_from_axis_angle, quaternion_multiply

Pointer = Tuple[float, float]

_Y_AXIS = (0.0, 1.0, 0.0)
_X_AXIS = (1.0, 0.0, 0.0)


@dataclass(frozen=True)
class DragState:
    """Idle when ``is_dragging`` is false; otherwise the last pointer position."""

    is_dragging: bool = False
    last_pointer: Pointer = (0.0, 0.0)


IDLE = DragState()


class DragRotator:
    """Turns pointer drags into incremental rotations of the planet group.

    Transitions: Idle --down--> Dragging --move--> Dragging --up--> Idle.
    Horizontal motion spins about world Y, vertical motion tilts about world X.
    """

    def __init__(self, sensitivity: float = 0.003) -> None:
        if sensitivity <= 0.0:
            raise ValueError("sensitivity must be positive.")
        self.sensitivity = float(sensitivity)

    def pointer_down(self, state: DragState, x: float, y: float) -> DragState:
        return DragState(is_dragging=True, last_pointer=(float(x), float(y)))

    def pointer_move(self, state: DragState, x: float, y: float) -> Tuple[DragState, Optional[Quat]]:
        if not state.is_dragging:
            return state, None
        dx = x - state.last_pointer[0]
        dy = y - state.last_pointer[1]
        q_y = quaternion_from_axis_angle(_Y_AXIS, dx * self.sensitivity)
        q_x = quaternion_from_axis_angle(_X_AXIS, dy * self.sensitivity)
        delta = quaternion_multiply(q_y, q_x)
        return DragState(is_dragging=True, last_pointer=(float(x), float(y))), delta

    def pointer_up(self, state: DragState) -> DragState:
        return DragState(is_dragging=False, last_pointer=state.last_pointer)
