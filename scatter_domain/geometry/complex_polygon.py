"""Polygon with one outer boundary and any number of holes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

import numpy as np
from shapely.geometry import Polygon
from shapely.geometry.polygon import orient

from .polygon_ops import ensure_valid, orient_ring, polygon_from_coords, ring_to_array, signed_area

logger = logging.getLogger(__name__)


class OuterBoundaryConflictError(ValueError):
    """A second outer boundary was added to a ComplexPolygon."""


@dataclass(eq=False)
class ComplexPolygon:
    """One counter-clockwise outer ring plus clockwise hole rings.

    Winding is the only thing that decides whether an added ring is the
    outer boundary or a hole. Rings are stored as open (N, 2) arrays.
    """

    outer: Optional[np.ndarray] = None
    inner: list[np.ndarray] = field(default_factory=list)

    @property
    def has_holes(self) -> bool:
        return len(self.inner) > 0

    @property
    def is_empty(self) -> bool:
        return self.outer is None

    def add(self, ring) -> None:
        """Add a ring, classifying it by winding.

        Rings with fewer than three points or zero area are ignored.

        Raises:
            OuterBoundaryConflictError: If the ring is counter-clockwise and
                an outer boundary is already set. The existing outer is kept.
        """
        coords = ring_to_array(ring)
        area = signed_area(coords)
        if len(coords) < 3 or area == 0.0:
            logger.debug(f"Ignoring degenerate ring with {len(coords)} points")
            return

        if area < 0.0:
            self.inner.append(coords)
            return

        if self.outer is not None:
            raise OuterBoundaryConflictError(
                f"Polygon already has an outer boundary ({len(self.outer)} points), "
                f"refusing second outer ring ({len(coords)} points)"
            )
        self.outer = coords

    def add_many(self, rings: Iterable) -> None:
        for ring in rings:
            self.add(ring)

    def outer_polygon(self) -> Polygon:
        if self.outer is None:
            return Polygon()
        return ensure_valid(polygon_from_coords(self.outer))

    def hole_polygons(self) -> list[Polygon]:
        return [ensure_valid(polygon_from_coords(hole)) for hole in self.inner]

    def to_shapely(self) -> Polygon:
        """Shapely polygon with holes (may be repaired into a MultiPolygon)."""
        if self.outer is None:
            return Polygon()
        return ensure_valid(polygon_from_coords(self.outer, self.inner))

    @classmethod
    def from_shapely(cls, polygon: Polygon) -> "ComplexPolygon":
        """Build from a Shapely polygon, normalising winding."""
        polygon = orient(polygon, sign=1.0)
        result = cls(outer=ring_to_array(polygon.exterior.coords))
        for interior in polygon.interiors:
            result.inner.append(orient_ring(interior.coords, counter_clockwise=False))
        return result

    def get_loops(self) -> list[np.ndarray]:
        """All loops, holes first and the outer boundary last."""
        loops = list(self.inner)
        if self.outer is not None:
            loops.append(self.outer)
        return loops

    @property
    def area(self) -> float:
        return self.to_shapely().area

    def copy(self) -> "ComplexPolygon":
        return ComplexPolygon(
            outer=None if self.outer is None else self.outer.copy(),
            inner=[hole.copy() for hole in self.inner],
        )
