"""Packaged DomainConfig presets and YAML config files.

A config source is a preset name (``"default"``, ``"preview"``), a path to
a YAML file, or a ready ``DomainConfig``. ``resolve_config`` turns any of
them into a ``DomainConfig`` and is what ``Domain`` uses.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from ..models.config import DomainConfig

logger = logging.getLogger(__name__)

PRESETS_DIR = Path(__file__).parent

ConfigSource = Union[DomainConfig, str, Path, None]


def available_presets() -> Dict[str, str]:
    """Map of packaged preset names to their one-line descriptions.

    The description is the preset file's leading ``#`` comment.
    """
    presets = {}
    for path in sorted(PRESETS_DIR.glob("*.yaml")):
        header = path.read_text().split("\n", 1)[0].strip()
        presets[path.stem] = header.lstrip("#").strip() if header.startswith("#") else ""
    return presets


def _source_path(source: Union[str, Path]) -> Path:
    path = Path(source)
    if path.suffix in (".yaml", ".yml"):
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path

    path = PRESETS_DIR / f"{source}.yaml"
    if not path.is_file():
        known = ", ".join(available_presets())
        raise FileNotFoundError(f"Unknown config preset '{source}' (available: {known})")
    return path


def read_config(
    source: Union[str, Path] = "default",
    overrides: Optional[Dict[str, Any]] = None,
) -> DomainConfig:
    """Read a preset or YAML file, then apply ``overrides`` on top.

    Raises:
        FileNotFoundError: If the preset or file does not exist
        pydantic.ValidationError: If the document has invalid settings
    """
    path = _source_path(source)
    config = DomainConfig.from_yaml(path.read_text())
    if overrides:
        config = config.with_overrides(overrides)
    logger.debug(f"Read domain config from {path}")
    return config


def resolve_config(config: ConfigSource = None) -> DomainConfig:
    """DomainConfig for any accepted source. ``None`` gives the defaults."""
    if config is None:
        return DomainConfig()
    if isinstance(config, DomainConfig):
        return config
    return read_config(config)


def write_config(config: DomainConfig, path: Union[str, Path]) -> Path:
    """Write ``config`` as YAML to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_yaml())
    logger.info(f"Wrote domain config to {path}")
    return path


def config_errors(text: str) -> list[str]:
    """Problems in a YAML config document, empty when it is valid."""
    try:
        DomainConfig.from_yaml(text)
    except yaml.YAMLError as e:
        return [f"invalid YAML: {e}"]
    except ValidationError as e:
        return [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
    return []
