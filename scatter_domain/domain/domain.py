"""Scattering domain: composed area of inclusive and exclusive shapes.

Discovery walks the root's subtree once, then bounds are computed right
away and boundary curves lazily on first access. Containment queries read
the discovered shape lists directly.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from shapely.errors import GEOSException

from ..geometry.complex_polygon import ComplexPolygon
from ..geometry.merger import PolygonMerger, polygon_from_rings
from ..models.bounds import Bounds
from ..models.config import DomainConfig
from ..models.curve import BoundaryCurve
from ..models.transform import Transform3D
from ..settings.loader import ConfigSource, resolve_config
from .bounds_calculator import BoundsCalculator
from .containment import ContainmentEngine, PointStatus
from .registry import NestedDomainMarker, ShapeBinding, ShapeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RootContext:
    """Root node and its space-query handle. Read-only, shared by copies."""

    root: Any
    space_state: Any = None

    @classmethod
    def from_root(cls, root) -> "RootContext":
        get_space_state = getattr(root, "get_space_state", None)
        return cls(root=root, space_state=get_space_state() if get_space_state else None)


class Domain:
    """Composed scattering area.

    Example:
        domain = Domain(config="preview")
        domain.discover(root)
        if domain.is_point_inside((1.0, 0.0, 2.0)):
            ...
    """

    def __init__(self, context: Optional[RootContext] = None, config: ConfigSource = None):
        self.context = context
        self.config: DomainConfig = resolve_config(config)
        self.registry = ShapeRegistry()
        self.containment = ContainmentEngine(self.registry)
        self.merger = PolygonMerger(self.config.merge, self.config.curves)
        self.bounds_global = Bounds()
        self.bounds_local = Bounds()
        self._edges: list[BoundaryCurve] = []
        self._edges_computed = False

    @property
    def positive_shapes(self) -> list[ShapeBinding]:
        return self.registry.positive_shapes

    @property
    def negative_shapes(self) -> list[ShapeBinding]:
        return self.registry.negative_shapes

    def discover(self, root=None, is_nested_domain: NestedDomainMarker = None) -> None:
        """Rebuild shapes and bounds from ``root`` (or the current root).

        Cached edges are dropped and recomputed on the next ``get_edges()``.
        """
        if root is not None:
            self.context = RootContext.from_root(root)
        if self.context is None:
            raise ValueError("Domain has no root to discover shapes from")

        self._edges = []
        self._edges_computed = False
        self.registry.discover(self.context.root, is_nested_domain)
        self.compute_bounds()

        if self.is_empty():
            logger.warning("Domain has no inclusive shapes, every point will be rejected")

    def compute_bounds(self) -> None:
        BoundsCalculator().compute(
            self.positive_shapes,
            self.get_global_transform(),
            self.bounds_global,
            self.bounds_local,
        )

    def compute_edges(self) -> None:
        """Merge inclusive outlines into boundary curves in the global frame."""
        root_transform = self.get_global_transform()
        open_edges: list[BoundaryCurve] = []
        inclusions = self._outlines(self.positive_shapes, "inclusive", root_transform, open_edges)
        exclusions = self._outlines(self.negative_shapes, "exclusive", root_transform)

        merged = self.merger.merge(inclusions, exclusions)
        self._edges = self.merger.to_curves(merged, root_transform) + open_edges
        self._edges_computed = True

    def _outlines(
        self,
        bindings: list[ShapeBinding],
        label: str,
        root_transform: Transform3D,
        open_edges: Optional[list[BoundaryCurve]] = None,
    ) -> list[ComplexPolygon]:
        """Outline polygon of every binding. Shapes whose edges fail are skipped."""
        polygons = []
        for index, binding in enumerate(bindings):
            source = f"{label} shape #{index} ({type(binding.shape).__name__})"
            try:
                rings = binding.shape.get_closed_edges(root_transform, binding.transform)
                if open_edges is not None:
                    open_edges.extend(binding.shape.get_open_edges(root_transform, binding.transform))
            except (GEOSException, ValueError) as e:
                logger.warning(f"Skipping edges of {source}: {e}")
                continue
            polygon = polygon_from_rings(rings, source=source)
            if not polygon.is_empty:
                polygons.append(polygon)
        return polygons

    def get_edges(self) -> list[BoundaryCurve]:
        if not self._edges_computed:
            self.compute_edges()
        return self._edges

    def is_point_inside(self, point) -> bool:
        return self.containment.is_point_inside(point)

    def is_point_excluded(self, point) -> bool:
        return self.containment.is_point_excluded(point)

    def classify_point(self, point) -> PointStatus:
        return self.containment.classify_point(point)

    def filter_points(self, points):
        return self.containment.filter_points(points)

    def is_empty(self) -> bool:
        return len(self.positive_shapes) == 0

    def get_root(self):
        return None if self.context is None else self.context.root

    def get_space_state(self):
        return None if self.context is None else self.context.space_state

    def get_global_transform(self) -> Transform3D:
        root = self.get_root()
        if root is None:
            return Transform3D.identity()
        return root.global_transform

    def get_local_transform(self) -> Transform3D:
        root = self.get_root()
        if root is None:
            return Transform3D.identity()
        return root.transform

    def get_copy(self) -> "Domain":
        """Independent copy: shapes cloned, bounds and edges value-copied.

        The root context is shared.
        """
        copy = Domain(self.context, self.config)
        copy.registry = self.registry.copy()
        copy.containment = ContainmentEngine(copy.registry)
        copy.bounds_global = self.bounds_global.copy()
        copy.bounds_local = self.bounds_local.copy()
        copy._edges = [curve.copy() for curve in self._edges]
        copy._edges_computed = self._edges_computed
        return copy
