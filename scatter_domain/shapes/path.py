"""Polyline shape, extruded infinitely along local Y."""

from typing import Literal

import numpy as np
from pydantic import Field, field_validator
from shapely.geometry import LineString, Point

from ..geometry.plane import to_plane
from ..geometry.polygon_ops import (
    ensure_valid,
    explode_polygons,
    orient_ring,
    polygon_from_coords,
    union_polygons,
)
from ..models.curve import BoundaryCurve
from ..models.transform import Transform3D
from .base import BaseShape, box_corners


class PathShape(BaseShape):
    """Area described by a polyline in the shape's local frame.

    Height is ignored: the shape is the vertical prism over its X/Z outline.
    A closed path covers its polygon. A positive thickness adds a band of
    half-width ``thickness / 2`` around the polyline. Open paths without
    thickness only contribute an open edge.
    """

    kind: Literal["path"] = "path"
    points: list[tuple[float, float, float]] = Field(
        ..., description="Polyline points in local coordinates"
    )
    closed: bool = Field(default=False, description="Connect the last point back to the first")
    thickness: float = Field(default=0.0, ge=0, description="Band width around the polyline")

    @field_validator("points")
    @classmethod
    def validate_points(cls, v: list[tuple[float, float, float]]) -> list[tuple[float, float, float]]:
        """Validate that the path has at least two points."""
        if len(v) < 2:
            raise ValueError(f"Path must have at least 2 points, got {len(v)}")
        return v

    @property
    def covers_area(self) -> bool:
        return (self.closed and len(self.points) >= 3) or self.thickness > 0

    def _polyline(self, points2d: np.ndarray) -> LineString:
        coords = [tuple(p) for p in points2d]
        if self.closed:
            coords.append(coords[0])
        return LineString(coords)

    def _outline(self, points2d: np.ndarray):
        parts = []
        if self.closed and len(points2d) >= 3:
            parts.append(ensure_valid(polygon_from_coords(points2d)))
        if self.thickness > 0:
            parts.append(self._polyline(points2d).buffer(self.thickness / 2.0))
        return union_polygons(parts)

    def is_point_inside(self, point, transform: Transform3D) -> bool:
        if not self.covers_area:
            return False
        local = transform.inverse().xform(point)
        query = Point(local[0], local[2])
        points2d = to_plane(self.points)
        if self.closed and len(points2d) >= 3:
            if ensure_valid(polygon_from_coords(points2d)).covers(query):
                return True
        if self.thickness > 0:
            return self._polyline(points2d).distance(query) <= self.thickness / 2.0
        return False

    def get_corners_global(self, transform: Transform3D) -> np.ndarray:
        points = np.asarray(self.points, dtype=float)
        margin = np.array([self.thickness / 2.0, 0.0, self.thickness / 2.0])
        low = points.min(axis=0) - margin
        high = points.max(axis=0) + margin
        return transform.xform_many(box_corners((high - low) / 2.0, (high + low) / 2.0))

    def get_closed_edges(self, root_transform, shape_transform) -> list[np.ndarray]:
        if not self.covers_area:
            return []
        relative = self.relative_transform(root_transform, shape_transform)
        points2d = to_plane(relative.xform_many(self.points))
        rings = []
        for polygon in explode_polygons(self._outline(points2d)):
            rings.append(orient_ring(polygon.exterior.coords, counter_clockwise=True))
            for interior in polygon.interiors:
                rings.append(orient_ring(interior.coords, counter_clockwise=False))
        return rings

    def get_open_edges(self, root_transform, shape_transform) -> list[BoundaryCurve]:
        if self.closed or self.thickness > 0:
            return []
        return [BoundaryCurve(shape_transform.xform_many(self.points), closed=False)]
