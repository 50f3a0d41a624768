"""Projection between 3D points and the 2D working plane (X/Z)."""

import numpy as np


def to_plane(points) -> np.ndarray:
    """Drop the Y axis: (N, 3) -> (N, 2) as (x, z)."""
    points = np.asarray(points, dtype=float).reshape(-1, 3)
    return points[:, [0, 2]]


def from_plane(points, height: float = 0.0) -> np.ndarray:
    """Lift (N, 2) plane points to (N, 3) with Y = ``height``."""
    points = np.asarray(points, dtype=float).reshape(-1, 2)
    lifted = np.empty((len(points), 3))
    lifted[:, 0] = points[:, 0]
    lifted[:, 1] = height
    lifted[:, 2] = points[:, 1]
    return lifted
