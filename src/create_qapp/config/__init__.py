"""Configuration management for create-qapp."""

from .settings import ScaffoldConfig, get_config, load_bundled_config, load_config

__all__ = [
    "ScaffoldConfig",
    "get_config",
    "load_bundled_config",
    "load_config",
]
