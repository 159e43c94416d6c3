"""Dangerous-Workflow — CI workflows that run untrusted code with privileges."""

from __future__ import annotations

from typing import Sequence

from riskcard.checks.evaluation import location_message, validate_findings
from riskcard.checks.logger import DetailLogger
from riskcard.checks.models import (
    CheckResult,
    create_inconclusive_result,
    create_max_score_result,
    create_min_score_result,
)
from riskcard.checks.registry import CheckDefinition
from riskcard.findings.models import Finding, Outcome

NAME = "Dangerous-Workflow"
PROBE_SCRIPT_INJECTION = "hasDangerousWorkflowScriptInjection"
PROBE_UNTRUSTED_CHECKOUT = "hasDangerousWorkflowUntrustedCheckout"

_WARN_TEXT = {
    PROBE_SCRIPT_INJECTION: "script injection with untrusted input",
    PROBE_UNTRUSTED_CHECKOUT: "untrusted code checkout",
}


def evaluate(name: str, findings: Sequence[Finding], dl: DetailLogger) -> CheckResult:
    """Any dangerous pattern drops the score to zero; no workflows is inconclusive."""
    invalid = validate_findings(name, findings, _WARN_TEXT.keys())
    if invalid is not None:
        return invalid

    if all(f.outcome == Outcome.NOT_APPLICABLE for f in findings):
        return create_inconclusive_result(name, "no workflows found")

    hits = [f for f in findings if f.outcome == Outcome.TRUE]
    for f in hits:
        text = f.message or _WARN_TEXT[f.probe]
        dl.warn(location_message(f, text))

    if hits:
        return create_min_score_result(name, "dangerous workflow patterns detected")
    return create_max_score_result(name, "no dangerous workflow patterns detected")


DANGEROUS_WORKFLOW = CheckDefinition(
    name=NAME,
    probes=(PROBE_SCRIPT_INJECTION, PROBE_UNTRUSTED_CHECKOUT),
    evaluate=evaluate,
)
