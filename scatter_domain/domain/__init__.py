"""Domain construction: shape discovery, containment, bounds and edges."""

from .bounds_calculator import BoundsCalculator
from .containment import ContainmentEngine, PointStatus
from .domain import Domain, RootContext
from .registry import NestedDomainMarker, ShapeBinding, ShapeRegistry

__all__ = [
    "Domain",
    "RootContext",
    "ShapeBinding",
    "ShapeRegistry",
    "NestedDomainMarker",
    "ContainmentEngine",
    "PointStatus",
    "BoundsCalculator",
]
