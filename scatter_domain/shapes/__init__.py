"""Shape primitives usable as domain inclusions or exclusions."""

from .base import BaseShape, box_corners
from .box import BoxShape
from .factory import AnyShape, shape_from_dict
from .path import PathShape
from .sphere import SphereShape

__all__ = [
    "AnyShape",
    "BaseShape",
    "BoxShape",
    "SphereShape",
    "PathShape",
    "box_corners",
    "shape_from_dict",
]
