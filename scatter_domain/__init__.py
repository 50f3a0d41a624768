"""Scatter Domain - compose placement areas from inclusive and exclusive shapes.

This package provides:
- Shape discovery below a scene root, with nested domains skipped
- Point containment where exclusion always wins over inclusion
- Global and root-local bounds of the inclusive shapes
- Shapely-based merging of shape outlines into boundary curves with holes

Typical use:
    from scatter_domain import Domain
    domain = Domain()
    domain.discover(root)
    curves = domain.get_edges()
"""

__version__ = "0.1.0"

from .domain import Domain, PointStatus, RootContext, ShapeBinding
from .geometry import ComplexPolygon, OuterBoundaryConflictError, PolygonMerger
from .models import Bounds, BoundaryCurve, DomainConfig, Transform3D
from .settings import read_config, resolve_config

__all__ = [
    "Domain",
    "RootContext",
    "ShapeBinding",
    "PointStatus",
    "ComplexPolygon",
    "OuterBoundaryConflictError",
    "PolygonMerger",
    "Bounds",
    "BoundaryCurve",
    "DomainConfig",
    "Transform3D",
    "read_config",
    "resolve_config",
    "__version__",
]
