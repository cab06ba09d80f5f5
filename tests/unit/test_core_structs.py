import numpy as np
import pytest

from planetscatter.core.placement import InstanceBatch, place_on_surface


def test_placement_matrix_composes_translation_rotation_scale() -> None:
    t = place_on_surface(0.0, 0.0, 250.0, scale=2.0)
    m = t.matrix()
    np.testing.assert_allclose(m[:3, 3], t.position)
    np.testing.assert_allclose(m[3], (0.0, 0.0, 0.0, 1.0))
    # local up (scaled) ends up along the surface normal
    np.testing.assert_allclose(m[:3, :3] @ np.array([0.0, 1.0, 0.0]), 2.0 * np.asarray(t.normal), atol=1e-12)


def test_placement_transform_is_immutable() -> None:
    t = place_on_surface(0.1, 0.2, 10.0, scale=1.0)
    with pytest.raises(AttributeError):
        t.scale = 3.0  # type: ignore[misc]


def test_instance_batch_from_transforms() -> None:
    transforms = [place_on_surface(lat, 0.1, 10.0, scale=0.5) for lat in (-0.5, 0.0, 0.5)]
    batch = InstanceBatch.from_transforms(transforms)
    assert len(batch) == 3
    assert batch.positions.shape == (3, 3)
    assert batch.orientations.shape == (3, 4)
    assert batch.scales.shape == (3,)
    np.testing.assert_allclose(batch.coordinates[:, 0], (-0.5, 0.0, 0.5))


def test_instance_batch_empty() -> None:
    batch = InstanceBatch.from_transforms([])
    assert len(batch) == 0
    assert batch.positions.shape == (0, 3)


def test_instance_batch_rejects_mismatched_columns() -> None:
    with pytest.raises(ValueError):
        InstanceBatch(
            positions=np.zeros((2, 3)),
            orientations=np.zeros((2, 4)),
            scales=np.zeros(1),
            normals=np.zeros((2, 3)),
            coordinates=np.zeros((2, 2)),
        )
