"""Weighted aggregation of check scores into one overall score."""

from __future__ import annotations

from typing import Sequence

import structlog

from riskcard.checks.models import INCONCLUSIVE_RESULT_SCORE, MIN_RESULT_SCORE, CheckResult
from riskcard.docs.models import RISK_WEIGHTS, CheckDoc, DocLookup
from riskcard.errors import DocumentationNotFoundError, InternalError

logger = structlog.get_logger()


def resolve_doc(docs: DocLookup, name: str) -> CheckDoc:
    """Look up *name*, turning every kind of miss into DocumentationNotFoundError."""
    try:
        doc = docs.get_check(name)
    except DocumentationNotFoundError:
        raise
    except LookupError as exc:
        raise DocumentationNotFoundError(name, str(exc)) from exc
    if doc is None:
        raise DocumentationNotFoundError(name)
    return doc


def aggregate_score(checks: Sequence[CheckResult], docs: DocLookup) -> float:
    """Risk-weighted mean of the conclusive check scores.

    Every check must be documented, inconclusive ones included, since an
    unweighted check would silently bias the result. Inconclusive checks are
    then left out of both sums. Returns the inconclusive sentinel when no
    check contributes.
    """
    total = 0.0
    score = 0.0
    for check in checks:
        risk = resolve_doc(docs, check.name).get_risk()
        weight = RISK_WEIGHTS.get(risk)
        if weight is None:
            raise InternalError(f"Invalid risk for {check.name}: '{risk}'")
        if check.score < MIN_RESULT_SCORE:
            continue
        total += weight
        score += weight * check.score

    if total == 0:
        logger.debug("aggregate_inconclusive", checks=len(checks))
        return float(INCONCLUSIVE_RESULT_SCORE)

    result = score / total
    logger.debug("aggregate_computed", checks=len(checks), score=result)
    return result


def format_score(score: float) -> str:
    """One-decimal rendering used on the wire: 8 → '8.0', 7.33 → '7.3'."""
    return f"{score:.1f}"
