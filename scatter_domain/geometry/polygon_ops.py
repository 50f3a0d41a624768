"""Polygon operations using Shapely.

Provides ring orientation helpers and robust union, intersection and
subtraction for merging domain outlines.
"""

from __future__ import annotations

import numpy as np
from shapely.geometry import GeometryCollection, MultiPoint, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.validation import make_valid

# Type aliases
PolygonLike = Polygon | MultiPolygon


def ring_to_array(ring) -> np.ndarray:
    """Normalise a ring to an (N, 2) array without a repeated closing point."""
    coords = np.asarray(ring, dtype=float).reshape(-1, 2)
    if len(coords) > 1 and np.allclose(coords[0], coords[-1]):
        coords = coords[:-1]
    return coords


def signed_area(ring) -> float:
    """Shoelace signed area. Positive for counter-clockwise rings."""
    coords = ring_to_array(ring)
    if len(coords) < 3:
        return 0.0
    x = coords[:, 0]
    y = coords[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


def is_clockwise(ring) -> bool:
    return signed_area(ring) < 0.0


def orient_ring(ring, counter_clockwise: bool = True) -> np.ndarray:
    """Return the ring with the requested winding."""
    coords = ring_to_array(ring)
    if (signed_area(coords) > 0.0) != counter_clockwise:
        coords = coords[::-1].copy()
    return coords


def polygon_from_coords(coords, holes=None) -> Polygon:
    """Create Shapely Polygon from coordinate list.

    Args:
        coords: Sequence of (x, y) pairs forming polygon exterior
        holes: Optional sequence of interior rings

    Returns:
        Shapely Polygon
    """
    shell = [tuple(p) for p in ring_to_array(coords)]
    interiors = [[tuple(p) for p in ring_to_array(h)] for h in (holes or [])]
    return Polygon(shell, interiors)


def polygon_to_coords(polygon: Polygon) -> np.ndarray:
    """Extract exterior ring of a Shapely Polygon as an open (N, 2) array."""
    return ring_to_array(polygon.exterior.coords)


def convex_hull_ring(points) -> np.ndarray | None:
    """Counter-clockwise convex hull of 2D points, or None when degenerate."""
    hull = MultiPoint([tuple(p) for p in np.asarray(points, dtype=float).reshape(-1, 2)]).convex_hull
    if not isinstance(hull, Polygon) or hull.area <= 0.0:
        return None
    return orient_ring(hull.exterior.coords, counter_clockwise=True)


def ensure_valid(geometry: BaseGeometry) -> BaseGeometry:
    if geometry is None or geometry.is_empty:
        return Polygon()
    if not geometry.is_valid:
        geometry = make_valid(geometry)
    return geometry


def explode_polygons(geometry: BaseGeometry, min_area: float = 0.0) -> list[Polygon]:
    """Flatten any geometry into its polygon parts with area above ``min_area``.

    Lines and points produced by degenerate booleans are discarded.
    """
    if geometry is None or geometry.is_empty:
        return []
    if isinstance(geometry, Polygon):
        return [geometry] if geometry.area > min_area else []
    if isinstance(geometry, (MultiPolygon, GeometryCollection)):
        parts = []
        for geom in geometry.geoms:
            parts.extend(explode_polygons(geom, min_area))
        return parts
    return []


def is_empty_area(geometry: BaseGeometry, epsilon: float = 0.0) -> bool:
    return geometry is None or geometry.is_empty or geometry.area <= epsilon


def union_polygons(polygons: list[PolygonLike]) -> PolygonLike:
    """Compute union of multiple polygons.

    Args:
        polygons: List of polygons to union

    Returns:
        Unified polygon (may be MultiPolygon)
    """
    if not polygons:
        return Polygon()

    valid_polygons = []
    for p in polygons:
        if p is None or p.is_empty:
            continue
        valid_polygons.append(ensure_valid(p))

    if not valid_polygons:
        return Polygon()

    return unary_union(valid_polygons)


def intersect_polygons(a: PolygonLike, b: PolygonLike) -> BaseGeometry:
    """Intersection of two polygons, repairing invalid input first."""
    return ensure_valid(a).intersection(ensure_valid(b))


def subtract_polygons(
    base: PolygonLike,
    subtract: list[PolygonLike],
) -> PolygonLike:
    """Subtract multiple polygons from base polygon.

    Args:
        base: Base polygon to subtract from
        subtract: List of polygons to subtract

    Returns:
        Result polygon (may be MultiPolygon or empty)
    """
    if base is None or base.is_empty:
        return Polygon()

    result = ensure_valid(base)
    for sub in subtract:
        if sub is None or sub.is_empty:
            continue
        result = result.difference(ensure_valid(sub))
        if result.is_empty:
            return Polygon()

    return ensure_valid(result)
