"""Global and root-local bounds of a domain's inclusive shapes."""

import logging
from typing import Iterable

from ..models.bounds import Bounds
from ..models.transform import Transform3D
from .registry import ShapeBinding

logger = logging.getLogger(__name__)


class BoundsCalculator:
    """Folds inclusive shape corners into a global and a local Bounds.

    Exclusive shapes never affect bounds. When the root transform cannot
    be inverted the local bounds stay empty.
    """

    def compute(
        self,
        bindings: Iterable[ShapeBinding],
        root_transform: Transform3D,
        bounds_global: Bounds,
        bounds_local: Bounds,
    ) -> None:
        """Reset both accumulators, feed every corner and finalize them."""
        bounds_global.clear()
        bounds_local.clear()
        try:
            to_local = root_transform.inverse()
        except ValueError as e:
            logger.warning(f"Root transform is degenerate, local bounds left empty: {e}")
            to_local = None

        for binding in bindings:
            if binding.exclusive:
                continue
            corners = binding.shape.get_corners_global(binding.transform)
            bounds_global.feed_many(corners)
            if to_local is not None:
                bounds_local.feed_many(to_local.xform_many(corners))

        bounds_global.compute()
        bounds_local.compute()
