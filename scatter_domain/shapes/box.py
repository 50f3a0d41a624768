"""Oriented box shape."""

from typing import Literal

import numpy as np
from pydantic import Field, field_validator

from ..geometry.plane import to_plane
from ..geometry.polygon_ops import convex_hull_ring
from ..models.transform import Transform3D
from .base import BaseShape, box_corners


class BoxShape(BaseShape):
    """Box centered on its transform origin, faces included."""

    kind: Literal["box"] = "box"
    size: tuple[float, float, float] = Field(
        default=(1.0, 1.0, 1.0), description="Box extents along local X, Y, Z"
    )

    @field_validator("size")
    @classmethod
    def validate_size(cls, v: tuple[float, float, float]) -> tuple[float, float, float]:
        """Validate that every extent is positive."""
        if min(v) <= 0:
            raise ValueError(f"Box size must be positive, got {v}")
        return v

    @property
    def half_extents(self) -> np.ndarray:
        return np.asarray(self.size, dtype=float) / 2.0

    def is_point_inside(self, point, transform: Transform3D) -> bool:
        local = transform.inverse().xform(point)
        return bool(np.all(np.abs(local) <= self.half_extents + 1e-9))

    def get_corners_global(self, transform: Transform3D) -> np.ndarray:
        return transform.xform_many(box_corners(self.half_extents))

    def get_closed_edges(self, root_transform, shape_transform) -> list[np.ndarray]:
        relative = self.relative_transform(root_transform, shape_transform)
        ring = convex_hull_ring(to_plane(relative.xform_many(box_corners(self.half_extents))))
        return [] if ring is None else [ring]
