"""Shape discovery under a domain root."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Union

from ..models.transform import Transform3D
from ..shapes.base import BaseShape

logger = logging.getLogger(__name__)

# Either a container type or a predicate recognising nested domains
NestedDomainMarker = Union[type, Callable[[Any], bool], None]


@dataclass(frozen=True, eq=False)
class ShapeBinding:
    """A discovered shape with its global transform at discovery time."""

    transform: Transform3D
    shape: BaseShape
    exclusive: bool = False

    def copy(self) -> "ShapeBinding":
        return ShapeBinding(
            transform=self.transform.copy(),
            shape=self.shape.get_copy(),
            exclusive=self.exclusive,
        )


def _as_predicate(marker: NestedDomainMarker) -> Callable[[Any], bool]:
    if marker is None:
        return lambda node: False
    if isinstance(marker, type):
        return lambda node: isinstance(node, marker)
    return marker


class ShapeRegistry:
    """Inclusive and exclusive shapes found below a root node."""

    def __init__(self):
        self.positive_shapes: list[ShapeBinding] = []
        self.negative_shapes: list[ShapeBinding] = []

    @property
    def shape_count(self) -> int:
        return len(self.positive_shapes) + len(self.negative_shapes)

    def clear(self) -> None:
        self.positive_shapes.clear()
        self.negative_shapes.clear()

    def discover(self, root, is_nested_domain: NestedDomainMarker = None) -> None:
        """Rebuild both shape lists from ``root``'s descendants.

        Args:
            root: Node exposing ``get_children()``
            is_nested_domain: Type or predicate for nodes whose subtree
                belongs to another domain and must not be entered
        """
        self.clear()
        self._discover_recursive(root, _as_predicate(is_nested_domain))
        logger.debug(
            f"Discovered {len(self.positive_shapes)} inclusive and "
            f"{len(self.negative_shapes)} exclusive shape(s)"
        )

    def _discover_recursive(self, node, is_nested: Callable[[Any], bool]) -> None:
        for child in node.get_children():
            if is_nested(child):
                continue

            shape = getattr(child, "shape", None)
            if isinstance(shape, BaseShape):
                binding = ShapeBinding(
                    transform=child.global_transform.copy(),
                    shape=shape,
                    exclusive=bool(getattr(child, "exclusive", False)),
                )
                if binding.exclusive:
                    self.negative_shapes.append(binding)
                else:
                    self.positive_shapes.append(binding)

            self._discover_recursive(child, is_nested)

    def copy(self) -> "ShapeRegistry":
        """Independent copy with every shape cloned."""
        registry = ShapeRegistry()
        registry.positive_shapes = [b.copy() for b in self.positive_shapes]
        registry.negative_shapes = [b.copy() for b in self.negative_shapes]
        return registry

