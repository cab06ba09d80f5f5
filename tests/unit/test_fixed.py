import numpy as np
import pytest

from planetscatter.core.sphere import rotate_vector
from planetscatter.errors import InvalidConfiguration
from planetscatter.scatter.fixed import FixedPlacementConfig, FixedPlacer


def test_fixed_placement_offsets_along_normal() -> None:
    (t,) = FixedPlacer(FixedPlacementConfig(lat=0.0, lon=0.0, scale=15.0, normal_offset=1.0)).scatter()
    np.testing.assert_allclose(t.position, (251.0, 0.0, 0.0), atol=1e-9)
    np.testing.assert_allclose(t.normal, (1.0, 0.0, 0.0), atol=1e-12)
    assert t.scale == 15.0


def test_fixed_placement_sinks_with_negative_offset() -> None:
    (t,) = FixedPlacer(FixedPlacementConfig(lat=0.2, lon=0.1, scale=3000.0, normal_offset=-2.0)).scatter()
    assert np.isclose(np.linalg.norm(t.position), 248.0)


def test_local_shift_is_rotated_into_surface_frame() -> None:
    cfg = FixedPlacementConfig(lat=0.0, lon=0.0, scale=50.0, normal_offset=1.0, local_shift=(-30.0, 0.0, 0.0))
    (t,) = FixedPlacer(cfg).scatter()
    # at (0, 0) the frame turns -90 degrees about z, so local -x becomes world +y
    np.testing.assert_allclose(t.position, (251.0, 30.0, 0.0), atol=1e-6)
    np.testing.assert_allclose(rotate_vector(t.orientation, (0.0, 1.0, 0.0)), t.normal, atol=1e-12)


def test_fixed_placement_rejects_non_positive_scale() -> None:
    with pytest.raises(InvalidConfiguration):
        FixedPlacer(FixedPlacementConfig(lat=0.0, lon=0.0, scale=0.0))
