"""Polygon geometry for domain outlines using Shapely."""

from .complex_polygon import ComplexPolygon, OuterBoundaryConflictError
from .merger import PolygonMerger, polygon_from_rings
from .plane import from_plane, to_plane
from .polygon_ops import (
    convex_hull_ring,
    explode_polygons,
    intersect_polygons,
    is_clockwise,
    orient_ring,
    polygon_from_coords,
    polygon_to_coords,
    signed_area,
    subtract_polygons,
    union_polygons,
)

__all__ = [
    # Polygon operations
    "polygon_from_coords",
    "polygon_to_coords",
    "convex_hull_ring",
    "explode_polygons",
    "union_polygons",
    "intersect_polygons",
    "subtract_polygons",
    "signed_area",
    "is_clockwise",
    "orient_ring",
    # Working plane
    "to_plane",
    "from_plane",
    # Merging
    "ComplexPolygon",
    "OuterBoundaryConflictError",
    "PolygonMerger",
    "polygon_from_rings",
]
