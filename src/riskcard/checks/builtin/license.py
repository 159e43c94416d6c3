"""License — presence, approval, and placement of the project license."""

from __future__ import annotations

from typing import Dict, Sequence

from riskcard.checks.evaluation import location_message, validate_findings
from riskcard.checks.logger import DetailLogger
from riskcard.checks.models import (
    CheckResult,
    LogMessage,
    create_min_score_result,
    create_result_with_score,
)
from riskcard.checks.registry import CheckDefinition
from riskcard.findings.models import Finding, Outcome

NAME = "License"
PROBE_LICENSE_FILE = "hasLicenseFile"
PROBE_APPROVED = "hasFSFOrOSIApprovedLicense"
PROBE_TOP_DIR = "hasLicenseFileAtTopDir"

# points per positive probe; sums to 10
_WEIGHTS: Dict[str, int] = {
    PROBE_LICENSE_FILE: 6,
    PROBE_APPROVED: 3,
    PROBE_TOP_DIR: 1,
}


def evaluate(name: str, findings: Sequence[Finding], dl: DetailLogger) -> CheckResult:
    invalid = validate_findings(name, findings, _WEIGHTS.keys())
    if invalid is not None:
        return invalid

    positive = {f.probe for f in findings if f.outcome == Outcome.TRUE}

    if PROBE_LICENSE_FILE not in positive:
        dl.warn(LogMessage(text="project does not have a license file"))
        return create_min_score_result(name, "license file not detected")

    for f in findings:
        if f.probe == PROBE_LICENSE_FILE and f.outcome == Outcome.TRUE:
            dl.info(location_message(f, "project has a license file"))

    if PROBE_APPROVED in positive:
        dl.info(LogMessage(text="FSF or OSI recognized license"))
    else:
        dl.warn(LogMessage(text="project license file does not contain an FSF or OSI license."))

    if PROBE_TOP_DIR not in positive:
        dl.warn(LogMessage(text="license file not at top directory"))

    score = sum(_WEIGHTS[p] for p in positive)
    return create_result_with_score(name, "license file detected", score)


LICENSE = CheckDefinition(
    name=NAME,
    probes=(PROBE_LICENSE_FILE, PROBE_APPROVED, PROBE_TOP_DIR),
    evaluate=evaluate,
)
