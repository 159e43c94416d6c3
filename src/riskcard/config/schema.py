"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

LogLevel = Literal["debug", "info", "warn", "error"]
OutputFormat = Literal["v1", "v2", "terminal"]

DEFAULT_LOG_LEVEL: LogLevel = "info"

LOG_LEVEL_ORDER: dict[str, int] = {
    "debug": 0,
    "info": 1,
    "warn": 2,
    "error": 3,
}


def level_at_or_above(level: str, threshold: str) -> bool:
    """Return True if *level* is at or above *threshold*."""
    return LOG_LEVEL_ORDER.get(level, 0) >= LOG_LEVEL_ORDER.get(threshold, 0)


@dataclass
class OutputConfig:
    format: OutputFormat = "v2"
    show_details: bool = False
    show_annotations: bool = False
    log_level: LogLevel = DEFAULT_LOG_LEVEL


@dataclass
class ChecksConfig:
    enable: List[str] = field(default_factory=list)  # empty = all enabled
    disable: List[str] = field(default_factory=list)
    max_workers: Optional[int] = None


@dataclass
class DocsConfig:
    catalog: Optional[str] = None  # path to a checks YAML; None = bundled catalog


@dataclass
class RiskcardConfig:
    version: str = "1.0"
    output: OutputConfig = field(default_factory=OutputConfig)
    checks: ChecksConfig = field(default_factory=ChecksConfig)
    docs: DocsConfig = field(default_factory=DocsConfig)
