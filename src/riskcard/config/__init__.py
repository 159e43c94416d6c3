"""Configuration loading, schema, defaults, and repository annotations."""

from riskcard.config.annotations import AnnotationConfig, load_annotations
from riskcard.config.loader import ConfigError, load_config
from riskcard.config.schema import LogLevel, RiskcardConfig, level_at_or_above

__all__ = [
    "AnnotationConfig",
    "ConfigError",
    "LogLevel",
    "RiskcardConfig",
    "level_at_or_above",
    "load_annotations",
    "load_config",
]
