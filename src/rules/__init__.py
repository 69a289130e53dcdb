"""Configuration for outline generation."""

from rules.config import (
    CONFIG_FILENAME,
    ConfigError,
    OutlineConfig,
    load_config,
    resolve_output_dir,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "OutlineConfig",
    "load_config",
    "resolve_output_dir",
]
