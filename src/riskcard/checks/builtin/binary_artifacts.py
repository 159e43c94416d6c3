"""Binary-Artifacts — penalise checked-in binaries that cannot be reviewed."""

from __future__ import annotations

from typing import Sequence

from riskcard.checks.evaluation import evaluate_decay
from riskcard.checks.logger import DetailLogger
from riskcard.checks.models import CheckResult
from riskcard.checks.registry import CheckDefinition
from riskcard.findings.models import Finding

NAME = "Binary-Artifacts"
PROBE = "hasUnverifiedBinaryArtifacts"


def evaluate(name: str, findings: Sequence[Finding], dl: DetailLogger) -> CheckResult:
    """One point off per unverified binary, never below zero."""
    return evaluate_decay(
        name,
        findings,
        dl,
        probe=PROBE,
        clean_reason="no binaries found in the repo",
        risk_reason="binaries present in source code",
        warn_text=lambda _f: "binary detected",
    )


BINARY_ARTIFACTS = CheckDefinition(name=NAME, probes=(PROBE,), evaluate=evaluate)
