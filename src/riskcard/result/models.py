"""Result container — everything one analysis run produces."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from riskcard.checks.models import CheckResult
from riskcard.config.annotations import AnnotationConfig
from riskcard.docs.models import DocLookup


@dataclass(frozen=True)
class RepoInfo:
    name: str
    commit_sha: str = ""


@dataclass(frozen=True)
class ToolInfo:
    """Identity of the analyzer; the commit pins documentation links."""

    version: str
    commit_sha: str = ""


@dataclass
class Result:
    """Complete result of an analysis run.

    The aggregate score is deliberately not a field: it is always derived
    from ``checks`` and the documentation catalog's risk weights.
    """

    repo: RepoInfo
    tool: ToolInfo
    date: datetime
    checks: List[CheckResult] = field(default_factory=list)
    metadata: List[str] = field(default_factory=list)
    config: AnnotationConfig = field(default_factory=AnnotationConfig)

    def aggregate_score(self, docs: DocLookup) -> float:
        from riskcard.result.aggregator import aggregate_score

        return aggregate_score(self.checks, docs)

    def get_check(self, name: str) -> CheckResult:
        for check in self.checks:
            if check.name == name:
                return check
        raise KeyError(name)
