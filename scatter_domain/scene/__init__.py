"""Scene tree nodes that hold shapes and domains."""

from .node import SceneNode, ScatterNode, ShapeNode

__all__ = ["SceneNode", "ShapeNode", "ScatterNode"]
