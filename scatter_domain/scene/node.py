"""Minimal scene tree providing transforms and child enumeration."""

from typing import Any, Mapping, Optional, Union

from ..domain.domain import Domain
from ..models.transform import Transform3D
from ..settings.loader import ConfigSource
from ..shapes.base import BaseShape
from ..shapes.factory import shape_from_dict


class SceneNode:
    """Node with a local transform, a parent and ordered children."""

    def __init__(
        self,
        name: str = "Node",
        transform: Optional[Transform3D] = None,
        space_state: Any = None,
    ):
        self.name = name
        self.transform = transform if transform is not None else Transform3D.identity()
        self.parent: Optional["SceneNode"] = None
        self._children: list["SceneNode"] = []
        self._space_state = space_state

    def add_child(self, node: "SceneNode") -> "SceneNode":
        if node.parent is not None:
            node.parent.remove_child(node)
        node.parent = self
        self._children.append(node)
        return node

    def remove_child(self, node: "SceneNode") -> None:
        self._children.remove(node)
        node.parent = None

    def get_children(self) -> list["SceneNode"]:
        return list(self._children)

    @property
    def global_transform(self) -> Transform3D:
        if self.parent is None:
            return self.transform
        return self.parent.global_transform * self.transform

    def get_space_state(self) -> Any:
        """Space-query handle of this node or its nearest ancestor."""
        node = self
        while node is not None:
            if node._space_state is not None:
                return node._space_state
            node = node.parent
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ShapeNode(SceneNode):
    """Node carrying a shape that includes or excludes area.

    ``shape`` may also be a mapping with a ``kind`` key, e.g.
    ``{"kind": "box", "size": [2, 1, 2]}``.
    """

    def __init__(
        self,
        name: str = "Shape",
        shape: Union[BaseShape, Mapping[str, Any], None] = None,
        exclusive: bool = False,
        transform: Optional[Transform3D] = None,
    ):
        super().__init__(name, transform)
        if isinstance(shape, Mapping):
            shape = shape_from_dict(shape)
        self.shape = shape
        self.exclusive = exclusive


class ScatterNode(SceneNode):
    """Domain container. Shapes below a nested ScatterNode belong to it."""

    def __init__(
        self,
        name: str = "Scatter",
        transform: Optional[Transform3D] = None,
        space_state: Any = None,
        config: ConfigSource = None,
    ):
        super().__init__(name, transform, space_state)
        self.domain = Domain(config=config)

    def rebuild_domain(self) -> Domain:
        self.domain.discover(self, is_nested_domain=ScatterNode)
        return self.domain
