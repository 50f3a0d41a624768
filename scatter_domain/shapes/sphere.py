"""Sphere shape."""

import math
from typing import Literal

import numpy as np
from pydantic import Field

from ..geometry.plane import to_plane
from ..geometry.polygon_ops import convex_hull_ring
from ..models.transform import Transform3D
from .base import BaseShape, box_corners


class SphereShape(BaseShape):
    """Sphere centered on its transform origin."""

    kind: Literal["sphere"] = "sphere"
    radius: float = Field(default=1.0, gt=0, description="Radius in local units")
    segments: int = Field(default=32, ge=8, description="Points per outline circle")

    def is_point_inside(self, point, transform: Transform3D) -> bool:
        local = transform.inverse().xform(point)
        return bool(np.linalg.norm(local) <= self.radius + 1e-9)

    def get_corners_global(self, transform: Transform3D) -> np.ndarray:
        return transform.xform_many(box_corners((self.radius, self.radius, self.radius)))

    def get_closed_edges(self, root_transform, shape_transform) -> list[np.ndarray]:
        relative = self.relative_transform(root_transform, shape_transform)
        ring = convex_hull_ring(to_plane(relative.xform_many(self._great_circles())))
        return [] if ring is None else [ring]

    def _great_circles(self) -> np.ndarray:
        """Points on the three axis-aligned great circles.

        Their projected hull approximates the silhouette under any rotation.
        """
        angles = np.linspace(0.0, 2.0 * math.pi, self.segments, endpoint=False)
        cos = self.radius * np.cos(angles)
        sin = self.radius * np.sin(angles)
        zero = np.zeros_like(angles)
        return np.vstack([
            np.column_stack([cos, zero, sin]),
            np.column_stack([cos, sin, zero]),
            np.column_stack([zero, cos, sin]),
        ])
