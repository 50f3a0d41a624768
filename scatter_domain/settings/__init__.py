"""Packaged DomainConfig presets."""

from .loader import available_presets, config_errors, read_config, resolve_config, write_config

__all__ = [
    "available_presets",
    "config_errors",
    "read_config",
    "resolve_config",
    "write_config",
]
