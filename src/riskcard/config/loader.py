"""Load and merge configuration from .riskcard.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from riskcard.config.schema import (
    LOG_LEVEL_ORDER,
    ChecksConfig,
    DocsConfig,
    OutputConfig,
    RiskcardConfig,
)

CONFIG_FILENAME = ".riskcard.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: RiskcardConfig) -> None:
    """Apply RISKCARD_* environment variable overrides."""
    if val := os.environ.get("RISKCARD_FORMAT"):
        if val in ("v1", "v2", "terminal"):
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("RISKCARD_LOG_LEVEL"):
        if val in LOG_LEVEL_ORDER:
            cfg.output.log_level = val  # type: ignore[assignment]
    if val := os.environ.get("RISKCARD_DISABLE_CHECKS"):
        cfg.checks.disable.extend(c.strip() for c in val.split(",") if c.strip())
    if os.environ.get("RISKCARD_SHOW_DETAILS") == "1":
        cfg.output.show_details = True


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: RiskcardConfig) -> None:
    if cfg.output.format not in ("v1", "v2", "terminal"):
        raise ConfigError(f"Invalid output format: {cfg.output.format}")
    if cfg.output.log_level not in LOG_LEVEL_ORDER:
        raise ConfigError(f"Invalid log level: {cfg.output.log_level}")


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> RiskcardConfig:
    """Load, validate, and return a RiskcardConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = RiskcardConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = RiskcardConfig(
            version=raw.get("version", "1.0"),
            output=_build_section(raw, OutputConfig, "output"),
            checks=_build_section(raw, ChecksConfig, "checks"),
            docs=_build_section(raw, DocsConfig, "docs"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
