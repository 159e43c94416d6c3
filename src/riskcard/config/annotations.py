"""Repository-side annotation config (``riskcard.yml``).

Maintainers use annotations to explain why a check scores low, e.g. that
the flagged binaries are test fixtures::

    annotations:
      - checks: [binary-artifacts]
        reasons:
          - reason: test-data
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from riskcard.config.loader import ConfigError

ANNOTATIONS_FILENAME = "riskcard.yml"

REASON_TEXT: Dict[str, str] = {
    "test-data": "The files and code are only used for testing purposes.",
    "remediated": "The vulnerability has been remediated.",
    "not-applicable": "The check is not applicable to this project.",
    "not-supported": "The check is not supported for this project.",
    "not-detected": "The finding is a false positive and does not affect this project.",
}


@dataclass(frozen=True)
class Annotation:
    checks: List[str]
    reasons: List[str]


@dataclass
class AnnotationConfig:
    annotations: List[Annotation] = field(default_factory=list)

    def reasons_for(self, check_name: str) -> List[str]:
        """Reason sentences for *check_name*, matched case-insensitively, in file order."""
        wanted = check_name.lower()
        out: List[str] = []
        for annotation in self.annotations:
            if any(c.lower() == wanted for c in annotation.checks):
                out.extend(REASON_TEXT[r] for r in annotation.reasons)
        return out


def parse_annotations(data: Any) -> AnnotationConfig:
    """Validate an already-loaded YAML document."""
    if data is None:
        return AnnotationConfig()
    if not isinstance(data, dict):
        raise ConfigError("annotation config must be a mapping")

    parsed: List[Annotation] = []
    for i, entry in enumerate(data.get("annotations") or []):
        if not isinstance(entry, dict):
            raise ConfigError(f"annotations[{i}] must be a mapping")
        checks = entry.get("checks") or []
        reasons = []
        for r in entry.get("reasons") or []:
            reason = r.get("reason") if isinstance(r, dict) else r
            if reason not in REASON_TEXT:
                raise ConfigError(f"annotations[{i}]: unknown reason {reason!r}")
            reasons.append(reason)
        parsed.append(Annotation(checks=[str(c) for c in checks], reasons=reasons))
    return AnnotationConfig(annotations=parsed)


def load_annotations(path: Optional[Path]) -> AnnotationConfig:
    """Load ``riskcard.yml``; a missing file means no annotations."""
    if path is None or not path.is_file():
        return AnnotationConfig()
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    return parse_annotations(data)
