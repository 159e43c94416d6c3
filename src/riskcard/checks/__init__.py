"""Check evaluation — result models, scoring curves, registry, runner."""

from riskcard.checks.logger import DetailLogger
from riskcard.checks.models import (
    INCONCLUSIVE_RESULT_SCORE,
    MAX_RESULT_SCORE,
    MIN_RESULT_SCORE,
    CheckDetail,
    CheckResult,
    LogMessage,
)
from riskcard.checks.registry import CheckDefinition, CheckRegistry, build_registry
from riskcard.checks.runner import evaluate_check, run_checks
from riskcard.checks.scoring import decay_score, proportional_score

__all__ = [
    "INCONCLUSIVE_RESULT_SCORE",
    "MAX_RESULT_SCORE",
    "MIN_RESULT_SCORE",
    "CheckDefinition",
    "CheckDetail",
    "CheckRegistry",
    "CheckResult",
    "DetailLogger",
    "LogMessage",
    "build_registry",
    "decay_score",
    "evaluate_check",
    "proportional_score",
    "run_checks",
]
