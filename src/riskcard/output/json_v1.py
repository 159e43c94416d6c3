"""Legacy V1 JSON encoder.

V1 carries check names and (optionally) rendered details only; no per-check
or aggregate scores. It is kept for older consumers and never gains fields.
"""

from __future__ import annotations

from typing import IO, Any, Dict, List, Optional

import structlog

from riskcard.config.schema import DEFAULT_LOG_LEVEL
from riskcard.errors import InternalError
from riskcard.output.encoding import dumps, write_all
from riskcard.result.details import detail_to_string
from riskcard.result.models import Result

logger = structlog.get_logger()

V1_DATE_FORMAT = "%Y-%m-%d"


def to_dict(
    result: Result, *, show_details: bool = False, log_level: str = DEFAULT_LOG_LEVEL
) -> Dict[str, Any]:
    """Convert a Result to the V1 document shape."""
    checks: List[Dict[str, Any]] = []
    for check in result.checks:
        details: Optional[List[str]] = None
        if show_details:
            rendered = [detail_to_string(d, log_level) for d in check.details]
            details = [m for m in rendered if m] or None
        checks.append({
            "Name": check.name,
            "Details": details,
            "Confidence": 0,
            "Pass": False,
        })

    return {
        "Repo": result.repo.name,
        "Date": result.date.strftime(V1_DATE_FORMAT),
        "Checks": checks,
        "Metadata": list(result.metadata),
    }


def render(
    result: Result, *, show_details: bool = False, log_level: str = DEFAULT_LOG_LEVEL
) -> str:
    """Return the V1 JSON string."""
    try:
        return dumps(to_dict(result, show_details=show_details, log_level=log_level))
    except (TypeError, ValueError) as exc:
        raise InternalError(f"encode v1 result: {exc}") from exc


def as_json(
    result: Result,
    show_details: bool,
    log_level: str,
    writer: IO[str],
) -> None:
    """Encode *result* as V1 JSON to *writer*; nothing is written on failure."""
    text = render(result, show_details=show_details, log_level=log_level)
    try:
        write_all(text, writer)
    except (OSError, ValueError) as exc:
        raise InternalError(f"encode v1 result: {exc}") from exc
    logger.debug("result_encoded", format="v1", checks=len(result.checks))
