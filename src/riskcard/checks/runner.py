"""Evaluate every enabled check over one batch of findings."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

import structlog

from riskcard.checks.logger import DetailLogger
from riskcard.checks.models import CheckResult
from riskcard.checks.registry import CheckDefinition, CheckRegistry
from riskcard.findings.models import Finding

logger = structlog.get_logger()


def evaluate_check(check: CheckDefinition, findings: Sequence[Finding]) -> CheckResult:
    """Run one check on the findings of its own probes and attach its details."""
    dl = DetailLogger()
    result = check.evaluate(check.name, check.select(findings), dl)
    result = result.with_details(dl.flush())

    if result.error is not None:
        logger.warning("check_evaluation_failed", check=check.name, error=str(result.error))
    else:
        logger.debug(
            "check_evaluated",
            check=check.name,
            score=result.score,
            details=len(result.details),
        )
    return result


def run_checks(
    findings: Sequence[Finding],
    registry: CheckRegistry,
    max_workers: Optional[int] = None,
) -> List[CheckResult]:
    """Evaluate all enabled checks concurrently.

    Evaluation functions are pure, so no locking is needed. Results come back
    in registry order regardless of completion order.
    """
    checks = registry.enabled_checks()
    if not checks:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda c: evaluate_check(c, findings), checks))
