"""Build shapes from plain data such as YAML-authored scenes."""

from typing import Annotated, Any, Mapping, Union

from pydantic import Field, TypeAdapter

from .base import BaseShape
from .box import BoxShape
from .path import PathShape
from .sphere import SphereShape

AnyShape = Annotated[Union[BoxShape, SphereShape, PathShape], Field(discriminator="kind")]

_shape_adapter = TypeAdapter(AnyShape)


def shape_from_dict(data: Mapping[str, Any]) -> BaseShape:
    """Validate ``data`` into the shape named by its ``kind`` key.

    Example:
        shape_from_dict({"kind": "sphere", "radius": 2.0})

    Raises:
        pydantic.ValidationError: If ``kind`` is missing or unknown, or a field is invalid
    """
    return _shape_adapter.validate_python(dict(data))
