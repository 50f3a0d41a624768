"""Boundary curves emitted by a domain."""

from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class BoundaryCurve:
    """Closed or open sequence of 3D points in the root's global frame.

    Closed curves repeat their first point as the last one.
    """

    points: np.ndarray
    closed: bool = False

    def __post_init__(self):
        self.points = np.array(self.points, dtype=float).reshape(-1, 3)

    @property
    def point_count(self) -> int:
        return len(self.points)

    def length(self) -> float:
        """Total polyline length."""
        if len(self.points) < 2:
            return 0.0
        return float(np.linalg.norm(np.diff(self.points, axis=0), axis=1).sum())

    def copy(self) -> "BoundaryCurve":
        return BoundaryCurve(self.points.copy(), self.closed)

    def is_equal_approx(self, other: "BoundaryCurve", tolerance: float = 1e-9) -> bool:
        if self.closed != other.closed or self.points.shape != other.points.shape:
            return False
        return bool(np.allclose(self.points, other.points, atol=tolerance))
