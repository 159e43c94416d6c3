"""Shared input validation and decay evaluation for built-in checks."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from riskcard.checks.logger import DetailLogger
from riskcard.checks.models import (
    CheckResult,
    LogMessage,
    create_inconclusive_result,
    create_max_score_result,
    create_result_with_score,
    create_runtime_error_result,
)
from riskcard.checks.scoring import decay_score
from riskcard.errors import InternalError
from riskcard.findings.models import Finding, Outcome, unique_probes_equal


def validate_findings(
    name: str, findings: Sequence[Finding], expected_probes: Iterable[str]
) -> Optional[CheckResult]:
    """Return a runtime-error result if *findings* are unusable, else None.

    An empty input means the pipeline lost this check's findings; it is never
    treated as "zero risk observed".
    """
    expected = list(expected_probes)
    if not findings:
        return create_runtime_error_result(name, InternalError("invalid probe results: no findings"))
    if not unique_probes_equal(findings, expected):
        probes = sorted({f.probe for f in findings})
        return create_runtime_error_result(
            name,
            InternalError(f"invalid probe results: got {probes}, want {sorted(expected)}"),
        )
    for f in findings:
        if f.outcome == Outcome.ERROR:
            return create_runtime_error_result(
                name, InternalError(f"probe {f.probe} failed: {f.message or 'unknown error'}")
            )
    return None


def location_message(finding: Finding, text: str) -> LogMessage:
    loc = finding.location
    if loc is None:
        return LogMessage(text=text)
    return LogMessage(
        text=text,
        path=loc.path,
        type=loc.type,
        offset=loc.line_start or 0,
        end_offset=loc.line_end or 0,
        snippet=loc.snippet or "",
    )


def evaluate_decay(
    name: str,
    findings: Sequence[Finding],
    dl: DetailLogger,
    *,
    probe: str,
    clean_reason: str,
    risk_reason: str,
    warn_text: Callable[[Finding], str],
    penalty: int = 1,
) -> CheckResult:
    """Score = max(0, 10 − penalty × number of ``TRUE`` findings).

    A lone ``FALSE`` finding is a real observation and yields the maximum.
    Findings that are all ``NOT_AVAILABLE`` make the check inconclusive.
    """
    invalid = validate_findings(name, findings, [probe])
    if invalid is not None:
        return invalid

    if all(f.outcome == Outcome.NOT_AVAILABLE for f in findings):
        return create_inconclusive_result(name, "probe data not available")

    hits = [f for f in findings if f.outcome == Outcome.TRUE]
    if not hits:
        return create_max_score_result(name, clean_reason)

    for f in hits:
        dl.warn(location_message(f, warn_text(f)))
    return create_result_with_score(name, risk_reason, decay_score(len(hits), penalty=penalty))
