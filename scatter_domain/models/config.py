"""Tunable settings for domain construction and polygon merging."""

from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field


class MergeSettings(BaseModel):
    """Settings for the boundary polygon merge."""

    push_holes_last: bool = Field(
        default=True,
        description="Queue hole-bearing polygons behind simple ones before merging",
    )
    carve_exclusions: bool = Field(
        default=True,
        description="Subtract exclusive shapes' outlines from inclusive polygons",
    )
    area_epsilon: float = Field(
        default=1e-9, ge=0, description="Areas at or below this value count as empty"
    )


class CurveSettings(BaseModel):
    """Settings for turning merged polygons into boundary curves."""

    min_loop_points: int = Field(
        default=2, ge=2, description="Loops with fewer points are dropped"
    )
    plane_height: float = Field(
        default=0.0, description="Y coordinate of the working plane in the root frame"
    )


class DomainConfig(BaseModel):
    """Complete configuration for a Domain.

    A Domain accepts either an instance, a packaged preset name such as
    ``"preview"`` or a path to a YAML file (see ``settings.resolve_config``).
    """

    merge: MergeSettings = Field(default_factory=MergeSettings, description="Merge settings")
    curves: CurveSettings = Field(default_factory=CurveSettings, description="Curve settings")

    @classmethod
    def from_yaml(cls, text: str) -> "DomainConfig":
        """Parse a YAML document. An empty document gives the defaults."""
        return cls.model_validate(yaml.safe_load(text) or {})

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.model_dump(mode="json"), sort_keys=False)

    def with_overrides(self, overrides: Dict[str, Any]) -> "DomainConfig":
        """Copy with nested values replaced by ``overrides``.

        Sections are updated key by key, so ``{"merge": {"area_epsilon": 0.1}}``
        keeps the other merge settings.
        """
        return DomainConfig.model_validate(_overlay(self.model_dump(), overrides))


def _overlay(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in overrides.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = _overlay(current, value)
        else:
            result[key] = value
    return result
