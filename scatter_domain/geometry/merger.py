"""Iterative union of complex polygons into disjoint outlines.

Each inclusive shape contributes one ComplexPolygon. Exclusive outlines are
carved out of them first, then a work-list loop unions overlapping pairs
until every remaining polygon is disjoint from the others:

1. Seed the work-list; hole-bearing polygons go to the back.
2. Pop the front polygon and scan the rest, newest first.
3. Skip pairs where one outer sits entirely inside a hole of the other.
4. If the two outers union into a single loop, rebuild the holes and push
   the merged polygon to the back. Otherwise keep scanning.
5. A polygon that merges with nothing is final.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

import numpy as np
from shapely.errors import GEOSException
from shapely.geometry import Polygon

from ..models.config import CurveSettings, MergeSettings
from ..models.curve import BoundaryCurve
from ..models.transform import Transform3D
from .complex_polygon import ComplexPolygon, OuterBoundaryConflictError
from .plane import from_plane
from .polygon_ops import (
    explode_polygons,
    intersect_polygons,
    is_empty_area,
    orient_ring,
    subtract_polygons,
    union_polygons,
)

logger = logging.getLogger(__name__)


def polygon_from_rings(rings: Iterable, source: str = "shape") -> ComplexPolygon:
    """Group one shape's closed rings into a ComplexPolygon.

    A second outer ring is logged and rejected; the first one is kept.
    """
    polygon = ComplexPolygon()
    for ring in rings:
        try:
            polygon.add(ring)
        except OuterBoundaryConflictError as e:
            logger.error(f"Ambiguous outer boundary from {source}: {e}")
    return polygon


class PolygonMerger:
    """Unions ComplexPolygons and converts the result into boundary curves."""

    def __init__(
        self,
        merge_settings: Optional[MergeSettings] = None,
        curve_settings: Optional[CurveSettings] = None,
    ):
        self.merge_settings = merge_settings or MergeSettings()
        self.curve_settings = curve_settings or CurveSettings()

    @property
    def epsilon(self) -> float:
        return self.merge_settings.area_epsilon

    def merge(
        self,
        polygons: Sequence[ComplexPolygon],
        exclusions: Sequence[ComplexPolygon] = (),
    ) -> list[ComplexPolygon]:
        """Merge polygons into a minimal set of disjoint ComplexPolygons.

        Args:
            polygons: One polygon per inclusive shape
            exclusions: Outlines to carve out before merging

        Returns:
            Disjoint polygons with reassigned holes
        """
        work = self._seed(polygons, exclusions)
        result: list[ComplexPolygon] = []

        while work:
            p1 = work.pop(0)
            merged = False

            for index in range(len(work) - 1, -1, -1):
                p2 = work[index]
                try:
                    if self._swallowed_by_hole(p1, p2) or self._swallowed_by_hole(p2, p1):
                        continue
                    combined = self.merge_pair(p1, p2)
                except (GEOSException, ValueError) as e:
                    logger.warning(f"Skipping polygon pair that failed to merge: {e}")
                    continue

                if combined is None:
                    continue

                del work[index]
                work.append(combined)
                merged = True
                break

            if not merged:
                result.append(p1)

        logger.debug(f"Merged {len(polygons)} polygon(s) into {len(result)}")
        return result

    def merge_pair(self, p1: ComplexPolygon, p2: ComplexPolygon) -> Optional[ComplexPolygon]:
        """Union two polygons if their outer boundaries overlap.

        Returns:
            The merged polygon, or None when the outers stay disjoint
        """
        outer1 = p1.outer_polygon()
        outer2 = p2.outer_polygon()

        pieces = explode_polygons(union_polygons([outer1, outer2]), self.epsilon)
        if len(pieces) != 1:
            return None
        union = pieces[0]

        # Gaps enclosed by the two outers are holes of the result
        fragments = [Polygon(ring) for ring in union.interiors]

        holes1 = p1.hole_polygons()
        holes2 = p2.hole_polygons()
        # A hole survives where both parents have one
        for h1 in holes1:
            for h2 in holes2:
                fragments.append(intersect_polygons(h1, h2))
        # or where only one parent has one and the other doesn't cover it
        for h2 in holes2:
            fragments.append(subtract_polygons(h2, [outer1]))
        for h1 in holes1:
            fragments.append(subtract_polygons(h1, [outer2]))

        merged = ComplexPolygon(outer=orient_ring(union.exterior.coords, counter_clockwise=True))
        for hole in explode_polygons(union_polygons(fragments), self.epsilon):
            if hole.interiors:
                logger.warning(
                    f"Hole fragment encloses {len(hole.interiors)} island(s), keeping its outline only"
                )
            merged.inner.append(orient_ring(hole.exterior.coords, counter_clockwise=False))
        return merged

    def _seed(
        self,
        polygons: Sequence[ComplexPolygon],
        exclusions: Sequence[ComplexPolygon],
    ) -> list[ComplexPolygon]:
        """Carve exclusions, normalise winding and order the work-list."""
        cutter = None
        if self.merge_settings.carve_exclusions and exclusions:
            cutter = union_polygons([e.to_shapely() for e in exclusions if not e.is_empty])
            if is_empty_area(cutter, self.epsilon):
                cutter = None

        simple: list[ComplexPolygon] = []
        holed: list[ComplexPolygon] = []
        for polygon in polygons:
            if polygon.is_empty:
                continue
            shape = polygon.to_shapely()
            if cutter is not None:
                shape = subtract_polygons(shape, [cutter])
            for part in explode_polygons(shape, self.epsilon):
                seed = ComplexPolygon.from_shapely(part)
                if seed.has_holes and self.merge_settings.push_holes_last:
                    holed.append(seed)
                else:
                    simple.append(seed)

        return simple + holed

    def _swallowed_by_hole(self, candidate: ComplexPolygon, other: ComplexPolygon) -> bool:
        """True if the candidate's outer lies entirely inside one of other's holes."""
        if not other.has_holes:
            return False
        outer = candidate.outer_polygon()
        for hole in other.hole_polygons():
            if is_empty_area(subtract_polygons(outer, [hole]), self.epsilon):
                return True
        return False

    def to_curves(
        self,
        polygons: Sequence[ComplexPolygon],
        root_transform: Transform3D,
    ) -> list[BoundaryCurve]:
        """Emit every loop as a closed curve in the root's global frame.

        Holes come first and the outer boundary last for each polygon.
        Winding is recomputed per loop.
        """
        curves = []
        for polygon in polygons:
            for hole in polygon.inner:
                curve = self._loop_to_curve(orient_ring(hole, counter_clockwise=False), root_transform)
                if curve is not None:
                    curves.append(curve)
            if polygon.outer is not None:
                curve = self._loop_to_curve(orient_ring(polygon.outer, counter_clockwise=True), root_transform)
                if curve is not None:
                    curves.append(curve)
        return curves

    def _loop_to_curve(self, ring: np.ndarray, root_transform: Transform3D) -> Optional[BoundaryCurve]:
        if len(ring) < self.curve_settings.min_loop_points:
            return None
        points = root_transform.xform_many(from_plane(ring, self.curve_settings.plane_height))
        points = np.vstack([points, points[:1]])
        return BoundaryCurve(points, closed=True)
