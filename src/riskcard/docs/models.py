"""Per-check documentation entries and the lookup interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

DEFAULT_BASE_URL = "https://github.com/ossf/scorecard"

# Aggregation weight per risk classification.
RISK_WEIGHTS: dict[str, float] = {
    "Critical": 10.0,
    "High": 7.5,
    "Medium": 5.0,
    "Low": 2.5,
}


@dataclass(frozen=True)
class CheckDoc:
    """Documentation for one check, including its risk classification."""

    name: str
    risk: str
    short: str
    description: str = ""
    remediation: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    base_url: str = DEFAULT_BASE_URL

    def get_documentation_url(self, commit: str) -> str:
        """Link to the docs at *commit*; unknown or empty commits point at main."""
        ref = commit if commit and commit != "unknown" else "main"
        return f"{self.base_url}/blob/{ref}/docs/checks.md#{self.name.lower()}"

    def get_short(self) -> str:
        return self.short

    def get_risk(self) -> str:
        return self.risk


class DocLookup(Protocol):
    """Anything that can resolve a check name to its documentation.

    Implementations raise ``DocumentationNotFoundError`` for unknown names;
    returning ``None`` is also treated as "not found" by callers.
    """

    def get_check(self, name: str) -> Optional[CheckDoc]:
        ...
