"""Check result data model and result constructors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Literal, Optional, Tuple

from riskcard.errors import InternalError
from riskcard.findings.models import FileType

if TYPE_CHECKING:
    from riskcard.config.annotations import AnnotationConfig

MAX_RESULT_SCORE = 10
MIN_RESULT_SCORE = 0
INCONCLUSIVE_RESULT_SCORE = -1

DetailType = Literal["info", "warn", "debug"]


@dataclass(frozen=True)
class LogMessage:
    """Human-readable explanation attached to a check result."""

    text: str
    path: str = ""
    type: FileType = FileType.NONE
    offset: int = 0
    end_offset: int = 0
    snippet: str = ""
    remediation: str = ""


@dataclass(frozen=True)
class CheckDetail:
    type: DetailType
    msg: LogMessage


@dataclass(frozen=True)
class CheckResult:
    """Normalized outcome of one check.

    ``score`` is in ``[0, 10]`` or equals ``INCONCLUSIVE_RESULT_SCORE``.
    When the evaluation itself failed, ``error`` is set and the score is
    always inconclusive.
    """

    name: str
    score: int
    reason: str
    details: Tuple[CheckDetail, ...] = ()
    error: Optional[InternalError] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        valid = MIN_RESULT_SCORE <= self.score <= MAX_RESULT_SCORE
        if not valid and self.score != INCONCLUSIVE_RESULT_SCORE:
            raise ValueError(f"{self.name}: score {self.score} out of range")
        if self.error is not None and self.score != INCONCLUSIVE_RESULT_SCORE:
            raise ValueError(f"{self.name}: failed result must be inconclusive")

    @property
    def is_inconclusive(self) -> bool:
        return self.score == INCONCLUSIVE_RESULT_SCORE

    def with_details(self, details: List[CheckDetail]) -> "CheckResult":
        return CheckResult(
            name=self.name,
            score=self.score,
            reason=self.reason,
            details=tuple(details),
            error=self.error,
        )

    def annotations(self, config: Optional["AnnotationConfig"]) -> List[str]:
        """Annotation sentences that *config* attaches to this check.

        A check at the maximum score has nothing to explain, so it never
        carries annotations.
        """
        if config is None or self.score == MAX_RESULT_SCORE:
            return []
        return config.reasons_for(self.name)


# ---- constructors ----


def create_result_with_score(name: str, reason: str, score: int) -> CheckResult:
    return CheckResult(name=name, score=score, reason=reason)


def create_max_score_result(name: str, reason: str) -> CheckResult:
    return create_result_with_score(name, reason, MAX_RESULT_SCORE)


def create_min_score_result(name: str, reason: str) -> CheckResult:
    return create_result_with_score(name, reason, MIN_RESULT_SCORE)


def create_proportional_score_result(name: str, reason: str, success: int, total: int) -> CheckResult:
    from riskcard.checks.scoring import proportional_score

    score = proportional_score(success, total)
    return create_result_with_score(name, f"{reason} -- score normalized to {score}", score)


def create_inconclusive_result(name: str, reason: str) -> CheckResult:
    return CheckResult(name=name, score=INCONCLUSIVE_RESULT_SCORE, reason=reason)


def create_runtime_error_result(name: str, error: InternalError) -> CheckResult:
    return CheckResult(
        name=name,
        score=INCONCLUSIVE_RESULT_SCORE,
        reason=str(error),
        error=error,
    )
