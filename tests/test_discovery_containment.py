"""Tests for shape discovery and point containment."""

import numpy as np
import pytest

from scatter_domain.domain.containment import ContainmentEngine, PointStatus
from scatter_domain.domain.registry import ShapeRegistry
from scatter_domain.models.transform import Transform3D
from scatter_domain.scene import ScatterNode, SceneNode, ShapeNode
from scatter_domain.shapes import BoxShape


@pytest.fixture
def scene():
    """Root with an inclusion, an exclusion, a nested scatter and a deep shape."""
    root = ScatterNode("Root")
    root.add_child(ShapeNode("Include", BoxShape(size=(4, 4, 4))))
    root.add_child(ShapeNode("Exclude", BoxShape(size=(1, 1, 1)), exclusive=True))
    root.add_child(ShapeNode("Empty", shape=None))

    nested = root.add_child(ScatterNode("Nested", Transform3D.from_translation(20, 0, 0)))
    nested.add_child(ShapeNode("NestedShape", BoxShape(size=(2, 2, 2))))

    group = root.add_child(SceneNode("Group", Transform3D.from_translation(10, 0, 0)))
    group.add_child(ShapeNode("Deep", BoxShape(size=(2, 2, 2))))
    return root


class TestShapeRegistry:
    """Test depth-first discovery."""

    def test_discovers_inclusive_and_exclusive(self, scene):
        """Shapes are sorted by their exclusive flag."""
        registry = ShapeRegistry()
        registry.discover(scene, ScatterNode)

        assert len(registry.positive_shapes) == 2
        assert len(registry.negative_shapes) == 1
        assert registry.shape_count == 3

    def test_nested_domain_predicate(self, scene):
        """A predicate marker also stops descent into nested domains."""
        registry = ShapeRegistry()
        registry.discover(scene, lambda node: isinstance(node, ScatterNode))
        assert len(registry.positive_shapes) == 2

    def test_without_marker_nested_shapes_leak_in(self, scene):
        """Without a marker nested domain shapes are collected."""
        registry = ShapeRegistry()
        registry.discover(scene)
        assert len(registry.positive_shapes) == 3

    def test_bindings_use_global_transforms(self, scene):
        """Bindings carry the shape's global transform."""
        registry = ShapeRegistry()
        registry.discover(scene, ScatterNode)
        origins = sorted(b.transform.origin[0] for b in registry.positive_shapes)
        assert origins == pytest.approx([0.0, 10.0])

    def test_bindings_are_snapshots(self, scene):
        """Moving a node after discovery leaves bindings unchanged."""
        registry = ShapeRegistry()
        registry.discover(scene, ScatterNode)
        include = scene.get_children()[0]
        include.transform = Transform3D.from_translation(50, 0, 0)

        assert np.allclose(registry.positive_shapes[0].transform.origin, 0.0)

    def test_shapes_below_shape_nodes_are_found(self):
        """Descent continues below shape-bearing nodes."""
        root = SceneNode("Root")
        parent = root.add_child(ShapeNode("Parent", BoxShape()))
        parent.add_child(ShapeNode("Child", BoxShape(), exclusive=True))

        registry = ShapeRegistry()
        registry.discover(root)
        assert len(registry.positive_shapes) == 1
        assert len(registry.negative_shapes) == 1

    def test_rediscovery_clears_previous_state(self, scene):
        """Rediscovery replaces the previous shape lists."""
        registry = ShapeRegistry()
        registry.discover(scene, ScatterNode)
        registry.discover(SceneNode("Empty"))
        assert registry.shape_count == 0

    def test_copy_clones_shapes(self, scene):
        """Registry copy clones shapes and transforms."""
        registry = ShapeRegistry()
        registry.discover(scene, ScatterNode)
        copy = registry.copy()

        for original, cloned in zip(registry.positive_shapes, copy.positive_shapes):
            assert cloned.shape is not original.shape
            assert cloned.transform is not original.transform
            assert cloned.transform.is_equal_approx(original.transform)


class TestContainmentEngine:
    """Exclusion always wins over inclusion."""

    @pytest.fixture
    def engine(self, scene):
        registry = ShapeRegistry()
        registry.discover(scene, ScatterNode)
        return ContainmentEngine(registry)

    def test_point_in_both_is_excluded(self, engine):
        """Point in an inclusion and an exclusion is excluded."""
        assert not engine.is_point_inside((0, 0, 0))
        assert engine.is_point_excluded((0, 0, 0))
        assert engine.classify_point((0, 0, 0)) == PointStatus.EXCLUDED

    def test_point_in_inclusion_only(self, engine):
        """Point in an inclusion only is inside."""
        assert engine.is_point_inside((1.5, 0, 0))
        assert not engine.is_point_excluded((1.5, 0, 0))
        assert engine.classify_point((1.5, 0, 0)) == PointStatus.INSIDE

    def test_point_in_deep_shape(self, engine):
        """Shapes below plain group nodes still count."""
        assert engine.is_point_inside((10.5, 0, 0))

    def test_point_in_nested_domain_is_outside(self, engine):
        """Nested domain shapes do not include points."""
        assert engine.classify_point((20, 0, 0)) == PointStatus.OUTSIDE
        assert engine.classify_point((30, 0, 0)) == PointStatus.OUTSIDE

    def test_filter_points(self, engine):
        """Mask marks only the points inside the domain."""
        points = [(0, 0, 0), (1.5, 0, 0), (30, 0, 0), (10, 0.5, 0)]
        mask = engine.filter_points(points)
        assert mask.tolist() == [False, True, False, True]

    def test_empty_registry_rejects_everything(self):
        """No shapes means every point is outside."""
        engine = ContainmentEngine(ShapeRegistry())
        for point in [(0, 0, 0), (1, 2, 3), (-100, 0, 100)]:
            assert not engine.is_point_inside(point)
            assert not engine.is_point_excluded(point)
