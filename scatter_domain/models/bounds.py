"""Axis-aligned bounds accumulator."""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np


@dataclass(eq=False)
class Bounds:
    """Axis-aligned extent accumulator in 3D.

    Points are fed one at a time; ``center`` and ``size`` are only valid
    after ``compute()``. Feeding more points afterwards leaves them stale
    until the next ``compute()``.
    """

    min: Optional[np.ndarray] = None
    max: Optional[np.ndarray] = None
    center: np.ndarray = field(default_factory=lambda: np.zeros(3))
    size: np.ndarray = field(default_factory=lambda: np.zeros(3))

    @property
    def is_empty(self) -> bool:
        return self.min is None

    def feed(self, point) -> None:
        point = np.asarray(point, dtype=float)
        if self.min is None:
            self.min = point.copy()
            self.max = point.copy()
            return
        self.min = np.minimum(self.min, point)
        self.max = np.maximum(self.max, point)

    def feed_many(self, points) -> None:
        for point in np.asarray(points, dtype=float).reshape(-1, 3):
            self.feed(point)

    def compute(self) -> None:
        """Finalize center and size from the fed extents."""
        if self.min is None:
            self.center = np.zeros(3)
            self.size = np.zeros(3)
            return
        self.size = self.max - self.min
        self.center = self.min + self.size / 2.0

    def clear(self) -> None:
        self.min = None
        self.max = None
        self.center = np.zeros(3)
        self.size = np.zeros(3)

    def contains(self, point, tolerance: float = 0.0) -> bool:
        """Check a point against the fed extents (not the computed center)."""
        if self.min is None:
            return False
        point = np.asarray(point, dtype=float)
        return bool(np.all(point >= self.min - tolerance) and np.all(point <= self.max + tolerance))

    def copy(self) -> "Bounds":
        return Bounds(
            min=None if self.min is None else self.min.copy(),
            max=None if self.max is None else self.max.copy(),
            center=self.center.copy(),
            size=self.size.copy(),
        )
