"""Value types for scatter_domain."""

from .bounds import Bounds
from .config import CurveSettings, DomainConfig, MergeSettings
from .curve import BoundaryCurve
from .transform import Transform3D, rotation_matrix

__all__ = [
    "Bounds",
    "BoundaryCurve",
    "Transform3D",
    "rotation_matrix",
    # Config
    "DomainConfig",
    "MergeSettings",
    "CurveSettings",
]
