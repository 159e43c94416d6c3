"""Vulnerabilities — penalise known, unfixed vulnerabilities in the project."""

from __future__ import annotations

from typing import Sequence

from riskcard.checks.evaluation import evaluate_decay
from riskcard.checks.logger import DetailLogger
from riskcard.checks.models import CheckResult
from riskcard.checks.registry import CheckDefinition
from riskcard.findings.models import Finding, Outcome

NAME = "Vulnerabilities"
PROBE = "hasOSVVulnerabilities"


def _warn_text(f: Finding) -> str:
    vuln_id = f.values.get("id") or f.message
    if vuln_id:
        return f"Project is vulnerable to {vuln_id}"
    return "Project is vulnerable to an unnamed advisory"


def evaluate(name: str, findings: Sequence[Finding], dl: DetailLogger) -> CheckResult:
    return evaluate_decay(
        name,
        findings,
        dl,
        probe=PROBE,
        clean_reason="0 existing vulnerabilities detected",
        risk_reason=f"{sum(1 for f in findings if f.outcome == Outcome.TRUE)} existing vulnerabilities detected",
        warn_text=_warn_text,
    )


VULNERABILITIES = CheckDefinition(name=NAME, probes=(PROBE,), evaluate=evaluate)
