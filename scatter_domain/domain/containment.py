"""Point containment checks against inclusive and exclusive shapes."""

import logging
from enum import Enum

import numpy as np

from .registry import ShapeBinding, ShapeRegistry

logger = logging.getLogger(__name__)


class PointStatus(Enum):
    """Where a point falls relative to the domain."""
    INSIDE = "inside"
    EXCLUDED = "excluded"
    OUTSIDE = "outside"


class ContainmentEngine:
    """Answers containment queries from a registry's shape lists.

    Every query is a linear scan over the shapes. Exclusion always wins
    over inclusion. A shape whose test fails (for example one placed by a
    transform that cannot be inverted) contains nothing.
    """

    def __init__(self, registry: ShapeRegistry):
        self.registry = registry
        self._reported: set[ShapeBinding] = set()

    def _binding_contains(self, binding: ShapeBinding, point) -> bool:
        try:
            return binding.shape.is_point_inside(point, binding.transform)
        except ValueError as e:
            if binding not in self._reported:
                self._reported.add(binding)
                logger.warning(
                    f"{type(binding.shape).__name__} cannot be tested and is treated as empty: {e}"
                )
            return False

    def is_point_excluded(self, point) -> bool:
        """True if the point lies inside any exclusive shape."""
        return any(self._binding_contains(b, point) for b in self.registry.negative_shapes)

    def is_point_inside(self, point) -> bool:
        """True if the point is in an inclusive shape and in no exclusive one."""
        if self.is_point_excluded(point):
            return False
        return any(self._binding_contains(b, point) for b in self.registry.positive_shapes)

    def classify_point(self, point) -> PointStatus:
        if self.is_point_excluded(point):
            return PointStatus.EXCLUDED
        if self.is_point_inside(point):
            return PointStatus.INSIDE
        return PointStatus.OUTSIDE

    def filter_points(self, points) -> np.ndarray:
        """Boolean mask of the (N, 3) points that are inside the domain."""
        points = np.asarray(points, dtype=float).reshape(-1, 3)
        return np.array([self.is_point_inside(p) for p in points], dtype=bool)
