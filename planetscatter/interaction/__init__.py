from .drag import IDLE, DragRotator, DragState
from .zoom import CameraZoom

__all__ = ["IDLE", "CameraZoom", "DragRotator", "DragState"]
