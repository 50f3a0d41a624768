"""Tests for Transform3D and the Bounds accumulator."""

import math

import numpy as np
import pytest

from scatter_domain.models.bounds import Bounds
from scatter_domain.models.transform import Transform3D, rotation_matrix


class TestTransform3D:
    """Test affine transform composition and inversion."""

    def test_identity_leaves_points_unchanged(self):
        """Identity maps points to themselves."""
        point = np.array([1.0, -2.0, 3.5])
        assert np.allclose(Transform3D.identity().xform(point), point)

    def test_composition_applies_right_operand_first(self):
        """(a * b).xform(p) == a.xform(b.xform(p))."""
        a = Transform3D.from_translation(1.0, 0.0, 0.0)
        b = Transform3D.identity().rotated((0, 1, 0), math.pi / 2)
        point = (1.0, 0.0, 0.0)

        # 90° around Y maps +X to -Z
        assert np.allclose(b.xform(point), (0.0, 0.0, -1.0))
        assert np.allclose((a * b).xform(point), a.xform(b.xform(point)))
        assert np.allclose((a * b).xform(point), (1.0, 0.0, -1.0))

    def test_inverse_round_trip(self):
        """Inverse undoes translation, rotation and scale."""
        t = (
            Transform3D.from_translation(3.0, -2.0, 5.0)
            .rotated((1, 1, 0), 0.7)
            .scaled((2.0, 0.5, 3.0))
        )
        point = np.array([0.3, 4.0, -1.2])
        assert np.allclose(t.inverse().xform(t.xform(point)), point)
        assert (t * t.inverse()).is_equal_approx(Transform3D.identity())

    def test_singular_transform_cannot_be_inverted(self):
        """Singular basis raises ValueError on inverse."""
        with pytest.raises(ValueError):
            Transform3D(basis=np.zeros((3, 3))).inverse()

    def test_xform_many_matches_xform(self):
        """Batch transform agrees with single points."""
        t = Transform3D.from_translation(1.0, 2.0, 3.0).rotated((0, 0, 1), 0.3)
        points = np.array([[0.0, 0.0, 0.0], [1.0, 2.0, 3.0], [-4.0, 0.5, 2.0]])
        many = t.xform_many(points)
        for point, mapped in zip(points, many):
            assert np.allclose(t.xform(point), mapped)

    def test_matrix_round_trip(self):
        """4x4 matrix conversion round-trips."""
        t = Transform3D.from_translation(1.0, 2.0, 3.0).rotated((0, 1, 0), 1.1)
        assert Transform3D.from_matrix(t.to_matrix()).is_equal_approx(t)

    def test_rotation_matrix_is_orthonormal(self):
        """Rotation matrices are proper orthonormal."""
        rot = rotation_matrix((0.2, 0.9, -0.4), 2.3)
        assert np.allclose(rot @ rot.T, np.eye(3))
        assert np.linalg.det(rot) == pytest.approx(1.0)

    def test_zero_rotation_axis_rejected(self):
        """A zero rotation axis raises ValueError."""
        with pytest.raises(ValueError):
            rotation_matrix((0, 0, 0), 1.0)

    def test_copy_is_independent(self):
        """Copy does not share state with the original."""
        t = Transform3D.from_translation(1.0, 0.0, 0.0)
        copy = t.copy()
        copy.origin[0] = 99.0
        assert t.origin[0] == 1.0


class TestBounds:
    """Test the feed/compute accumulator."""

    def test_compute_center_and_size(self):
        """Center and size follow the fed extents."""
        bounds = Bounds()
        bounds.feed((-1.0, -2.0, -3.0))
        bounds.feed((3.0, 2.0, 1.0))
        bounds.compute()

        assert np.allclose(bounds.size, (4.0, 4.0, 4.0))
        assert np.allclose(bounds.center, (1.0, 0.0, -1.0))
        assert np.allclose(bounds.min, (-1.0, -2.0, -3.0))
        assert np.allclose(bounds.max, (3.0, 2.0, 1.0))

    def test_results_are_stale_until_recomputed(self):
        """Center and size update only on compute."""
        bounds = Bounds()
        bounds.feed((0.0, 0.0, 0.0))
        bounds.feed((2.0, 2.0, 2.0))
        bounds.compute()

        bounds.feed((10.0, 0.0, 0.0))
        assert np.allclose(bounds.size, (2.0, 2.0, 2.0))

        bounds.compute()
        assert np.allclose(bounds.size, (10.0, 2.0, 2.0))

    def test_empty_bounds_compute_to_zero(self):
        """Empty bounds compute to zero size and center."""
        bounds = Bounds()
        bounds.compute()
        assert bounds.is_empty
        assert np.allclose(bounds.size, 0.0)
        assert np.allclose(bounds.center, 0.0)
        assert not bounds.contains((0.0, 0.0, 0.0))

    def test_clear_resets_everything(self):
        """Clear empties the accumulator."""
        bounds = Bounds()
        bounds.feed_many([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]])
        bounds.compute()
        bounds.clear()
        assert bounds.is_empty
        assert np.allclose(bounds.size, 0.0)

    def test_contains_uses_fed_extents(self):
        """Contains checks the fed extents with a tolerance."""
        bounds = Bounds()
        bounds.feed_many([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]])
        assert bounds.contains((0.5, 0.5, 0.5))
        assert not bounds.contains((1.5, 0.5, 0.5))
        assert bounds.contains((1.05, 0.5, 0.5), tolerance=0.1)

    def test_copy_is_independent(self):
        """Copy does not share state with the original."""
        bounds = Bounds()
        bounds.feed_many([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]])
        bounds.compute()

        copy = bounds.copy()
        copy.feed((5.0, 5.0, 5.0))
        copy.compute()

        assert np.allclose(bounds.size, (1.0, 1.0, 1.0))
        assert np.allclose(copy.size, (5.0, 5.0, 5.0))
