"""Shape capability consumed by the domain."""

from abc import ABC, abstractmethod

import numpy as np
from pydantic import BaseModel

from ..models.curve import BoundaryCurve
from ..models.transform import Transform3D


def box_corners(half_extents, center=(0.0, 0.0, 0.0)) -> np.ndarray:
    """The 8 corners of an axis-aligned box as an (8, 3) array."""
    hx, hy, hz = half_extents
    signs = np.array([
        [sx, sy, sz]
        for sx in (-1.0, 1.0)
        for sy in (-1.0, 1.0)
        for sz in (-1.0, 1.0)
    ])
    return np.asarray(center, dtype=float) + signs * np.array([hx, hy, hz], dtype=float)


class BaseShape(BaseModel, ABC):
    """A primitive that can contribute area to (or carve area out of) a domain.

    Transforms passed in are global transforms. Closed edges are returned
    in the root's working plane as open (N, 2) rings: outer rings
    counter-clockwise, holes clockwise.
    """

    @abstractmethod
    def is_point_inside(self, point, transform: Transform3D) -> bool:
        """Test a global point against the shape placed at ``transform``."""

    @abstractmethod
    def get_corners_global(self, transform: Transform3D) -> np.ndarray:
        """Extreme points of the shape in the global frame, (N, 3)."""

    @abstractmethod
    def get_closed_edges(
        self,
        root_transform: Transform3D,
        shape_transform: Transform3D,
    ) -> list[np.ndarray]:
        """Closed outline rings projected on the root's working plane."""

    def get_open_edges(
        self,
        root_transform: Transform3D,
        shape_transform: Transform3D,
    ) -> list[BoundaryCurve]:
        """Open curves in the global frame. Most shapes have none."""
        return []

    def get_copy(self) -> "BaseShape":
        return self.model_copy(deep=True)

    @staticmethod
    def relative_transform(root_transform: Transform3D, shape_transform: Transform3D) -> Transform3D:
        """Shape transform expressed in the root's local frame."""
        return root_transform.inverse() * shape_transform
