import numpy as np
import pytest

from planetscatter.assets.group import PlanetGroup
from planetscatter.core.placement import place_on_surface
from planetscatter.interaction import IDLE, CameraZoom, DragRotator, DragState


def test_move_while_idle_does_nothing() -> None:
    rot = DragRotator()
    state, delta = rot.pointer_move(IDLE, 10.0, 10.0)
    assert state == IDLE
    assert delta is None


def test_drag_cycle_transitions() -> None:
    rot = DragRotator(sensitivity=0.003)
    state = rot.pointer_down(IDLE, 100.0, 50.0)
    assert state == DragState(True, (100.0, 50.0))
    state, delta = rot.pointer_move(state, 200.0, 50.0)
    assert state.is_dragging and state.last_pointer == (200.0, 50.0)
    np.testing.assert_allclose(delta, (0.0, np.sin(0.15), 0.0, np.cos(0.15)), atol=1e-12)
    state = rot.pointer_up(state)
    assert not state.is_dragging


def test_drag_rotates_planet_group() -> None:
    group = PlanetGroup(radius=250.0)
    group.add_layer("barn", [place_on_surface(0.0, 0.0, 250.0, scale=1.0)])
    rot = DragRotator(sensitivity=0.003)
    state = rot.pointer_down(IDLE, 0.0, 0.0)
    # 0.5 pi about world Y, split over two moves
    step = (np.pi / 2) / 0.003 / 2
    for x in (step, 2 * step):
        state, delta = rot.pointer_move(state, x, 0.0)
        group.rotate(delta)
    world = group.world_matrix(group.instances[0])
    np.testing.assert_allclose(world[:3, 3], (0.0, 0.0, -250.0), atol=1e-6)


def test_invalid_sensitivity() -> None:
    with pytest.raises(ValueError):
        DragRotator(sensitivity=0.0)


def test_camera_zoom_eases_out() -> None:
    zoom = CameraZoom(start_y=400.0, duration_ms=2500.0)
    assert zoom.height_at(0.0) == 400.0
    assert zoom.height_at(1250.0) == pytest.approx(50.0)
    assert zoom.height_at(2500.0) == 0.0
    assert zoom.height_at(9000.0) == 0.0
    assert not zoom.finished(2499.0)
    assert zoom.finished(2500.0)
