"""3D affine transforms backed by numpy.

A transform is a 3x3 basis plus an origin. Points are mapped with
``basis @ point + origin``, so composing ``a * b`` applies ``b`` first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


def rotation_matrix(axis, angle: float) -> np.ndarray:
    """Rotation matrix around an arbitrary axis (Rodrigues formula).

    Args:
        axis: 3-component axis, normalised internally
        angle: Rotation angle in radians

    Returns:
        3x3 rotation matrix
    """
    axis = np.asarray(axis, dtype=float)
    norm = np.linalg.norm(axis)
    if norm == 0.0:
        raise ValueError("Rotation axis must be non-zero")
    x, y, z = axis / norm
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    return np.array([
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ])


@dataclass(eq=False)
class Transform3D:
    """Affine transform: basis (3x3) and origin (3)."""

    basis: np.ndarray = field(default_factory=lambda: np.eye(3))
    origin: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self):
        self.basis = np.array(self.basis, dtype=float)
        self.origin = np.array(self.origin, dtype=float)
        if self.basis.shape != (3, 3):
            raise ValueError(f"basis must be 3x3, got shape {self.basis.shape}")
        if self.origin.shape != (3,):
            raise ValueError(f"origin must have 3 components, got shape {self.origin.shape}")

    @classmethod
    def identity(cls) -> "Transform3D":
        return cls()

    @classmethod
    def from_translation(cls, x: float, y: float, z: float) -> "Transform3D":
        return cls(origin=np.array([x, y, z], dtype=float))

    @classmethod
    def from_matrix(cls, matrix) -> "Transform3D":
        """Build from a 4x4 homogeneous matrix (last row ignored)."""
        matrix = np.asarray(matrix, dtype=float)
        if matrix.shape != (4, 4):
            raise ValueError(f"matrix must be 4x4, got shape {matrix.shape}")
        return cls(basis=matrix[:3, :3], origin=matrix[:3, 3])

    def to_matrix(self) -> np.ndarray:
        matrix = np.eye(4)
        matrix[:3, :3] = self.basis
        matrix[:3, 3] = self.origin
        return matrix

    def xform(self, point) -> np.ndarray:
        """Map a single point."""
        return self.basis @ np.asarray(point, dtype=float) + self.origin

    def xform_many(self, points) -> np.ndarray:
        """Map an (N, 3) array of points."""
        points = np.asarray(points, dtype=float).reshape(-1, 3)
        return points @ self.basis.T + self.origin

    def inverse(self) -> "Transform3D":
        """Affine inverse.

        Raises:
            ValueError: If the basis is singular
        """
        try:
            inv_basis = np.linalg.inv(self.basis)
        except np.linalg.LinAlgError as e:
            raise ValueError(f"Transform is not invertible: {e}") from e
        return Transform3D(basis=inv_basis, origin=-(inv_basis @ self.origin))

    def __mul__(self, other: "Transform3D") -> "Transform3D":
        if not isinstance(other, Transform3D):
            return NotImplemented
        return Transform3D(
            basis=self.basis @ other.basis,
            origin=self.basis @ other.origin + self.origin,
        )

    def translated(self, offset) -> "Transform3D":
        """Copy moved by ``offset`` in the parent frame."""
        return Transform3D(self.basis, self.origin + np.asarray(offset, dtype=float))

    def scaled(self, factors) -> "Transform3D":
        """Copy with its local axes scaled by ``factors`` (scalar or 3 values)."""
        factors = np.broadcast_to(np.asarray(factors, dtype=float), (3,))
        return Transform3D(self.basis @ np.diag(factors), self.origin)

    def rotated(self, axis, angle: float) -> "Transform3D":
        """Copy rotated around a parent-frame axis through the parent origin."""
        rot = rotation_matrix(axis, angle)
        return Transform3D(rot @ self.basis, rot @ self.origin)

    def copy(self) -> "Transform3D":
        return Transform3D(self.basis.copy(), self.origin.copy())

    def is_equal_approx(self, other: "Transform3D", tolerance: float = 1e-9) -> bool:
        return bool(
            np.allclose(self.basis, other.basis, atol=tolerance)
            and np.allclose(self.origin, other.origin, atol=tolerance)
        )

    def __repr__(self) -> str:
        return f"Transform3D(basis={self.basis.tolist()}, origin={self.origin.tolist()})"
