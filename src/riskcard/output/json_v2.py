"""Detailed V2 JSON encoder, and an experimental decoder for it."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import IO, Any, Dict, List, Optional, Tuple

import structlog

from riskcard.checks.models import CheckResult
from riskcard.config.schema import DEFAULT_LOG_LEVEL, LogLevel
from riskcard.docs.models import DocLookup
from riskcard.errors import DateFormatError, DocumentationNotFoundError, FormatError, InternalError
from riskcard.output.encoding import dumps, write_all
from riskcard.result.aggregator import aggregate_score, format_score, resolve_doc
from riskcard.result.details import detail_to_string, string_to_detail
from riskcard.result.models import RepoInfo, Result, ToolInfo

logger = structlog.get_logger()

LEGACY_DATE_FORMAT = "%Y-%m-%d"

_RFC3339_RE = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<tz>[Zz]|[+-]\d{2}:\d{2})$"
)


@dataclass(frozen=True)
class JSON2Options:
    log_level: LogLevel = DEFAULT_LOG_LEVEL
    details: bool = False
    annotations: bool = False


# ---- dates ----


def format_rfc3339(date: datetime) -> str:
    """RFC 3339 at second precision; naive datetimes are taken as UTC."""
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    text = date.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def _parse_rfc3339(text: str) -> datetime:
    m = _RFC3339_RE.match(text)
    if m is None:
        raise DateFormatError(f"not an RFC 3339 timestamp: {text!r}")
    tz = m.group("tz").upper()
    tz = "+00:00" if tz == "Z" else tz
    # fromisoformat before 3.11 only takes 3 or 6 fractional digits
    frac = (m.group("frac") or "").ljust(6, "0")[:6]
    try:
        return datetime.fromisoformat(f"{m.group('base').upper()}.{frac}{tz}")
    except ValueError as exc:
        raise DateFormatError(f"invalid RFC 3339 timestamp {text!r}: {exc}") from exc


def parse_date(text: Any) -> datetime:
    """RFC 3339 first, then exactly one fallback to a bare ``YYYY-MM-DD`` date."""
    if not isinstance(text, str):
        raise FormatError(f"parse analysis time: date must be a string, got {type(text).__name__}")
    try:
        return _parse_rfc3339(text)
    except DateFormatError:
        pass
    try:
        return datetime.strptime(text, LEGACY_DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError as exc:
        raise FormatError(f"parse analysis time: {exc}") from exc


# ---- encode ----


def _check_to_dict(
    check: CheckResult, result: Result, docs: DocLookup, opt: JSON2Options
) -> Dict[str, Any]:
    doc = resolve_doc(docs, check.name)

    details: Optional[List[str]] = None
    if opt.details:
        rendered = [detail_to_string(d, opt.log_level) for d in check.details]
        details = [m for m in rendered if m] or None

    out: Dict[str, Any] = {
        "details": details,
        "score": check.score,
        "reason": check.reason,
        "name": check.name,
        "documentation": {
            "url": doc.get_documentation_url(result.tool.commit_sha),
            "short": doc.get_short(),
        },
    }
    if opt.annotations:
        annotations = check.annotations(result.config)
        if annotations:
            out["annotations"] = annotations
    return out


def to_dict(
    result: Result, docs: DocLookup, opt: Optional[JSON2Options] = None
) -> Dict[str, Any]:
    """Convert a Result to the V2 document shape.

    Raises ``DocumentationNotFoundError`` if any check is undocumented.
    """
    opt = opt or JSON2Options()
    score = aggregate_score(result.checks, docs)

    return {
        "date": format_rfc3339(result.date),
        "repo": {
            "name": result.repo.name,
            "commit": result.repo.commit_sha,
        },
        "scorecard": {
            "version": result.tool.version,
            "commit": result.tool.commit_sha,
        },
        # float of the one-decimal text so json renders exactly that text
        "score": float(format_score(score)),
        "checks": [_check_to_dict(c, result, docs, opt) for c in result.checks],
        "metadata": list(result.metadata),
    }


def render(result: Result, docs: DocLookup, opt: Optional[JSON2Options] = None) -> str:
    """Return the V2 JSON string.

    Lookup and aggregation failures keep their type and gain the
    ``encode v2 result`` prefix.
    """
    try:
        doc = to_dict(result, docs, opt)
    except DocumentationNotFoundError as exc:
        raise DocumentationNotFoundError(
            exc.check_name, exc.detail, operation="encode v2 result"
        ) from exc
    except InternalError as exc:
        raise InternalError(f"encode v2 result: {exc}") from exc
    try:
        return dumps(doc)
    except (TypeError, ValueError) as exc:
        raise InternalError(f"encode v2 result: {exc}") from exc


def as_json2(
    result: Result,
    writer: IO[str],
    docs: DocLookup,
    opt: Optional[JSON2Options] = None,
) -> None:
    """Encode *result* as V2 JSON to *writer*.

    The document is rendered completely before anything is written, so a
    failed encode leaves *writer* untouched.
    """
    text = render(result, docs, opt)
    try:
        write_all(text, writer)
    except (OSError, ValueError) as exc:
        raise InternalError(f"encode v2 result: {exc}") from exc
    logger.debug("result_encoded", format="v2", checks=len(result.checks))


# ---- decode ----


def _expect(value: Any, kind: type, what: str) -> Any:
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise FormatError(f"decode json: {what} must be {kind.__name__}")
    return value


def _check_from_dict(raw: Any) -> CheckResult:
    raw = _expect(raw, dict, "check")
    raw_details = _expect(raw.get("details") or [], list, "check details")
    details = [string_to_detail(_expect(d, str, "check detail")) for d in raw_details]
    try:
        return CheckResult(
            name=_expect(raw.get("name", ""), str, "check name"),
            score=_expect(raw.get("score", 0), int, "check score"),
            reason=_expect(raw.get("reason", ""), str, "check reason"),
            details=tuple(details),
        )
    except ValueError as exc:
        raise FormatError(f"decode json: {exc}") from exc


def experimental_from_json2(reader: IO[str]) -> Tuple[Result, float]:
    """EXPERIMENTAL: decode a V2 document. The schema contract may change.

    Returns the result and its aggregate score separately, since ``Result``
    does not store a derived score. Unknown fields are ignored. Decoded
    checks carry no annotations and no structured detail beyond what the
    rendered strings hold.
    """
    try:
        raw = json.load(reader)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise FormatError(f"decode json: {exc}") from exc
    raw = _expect(raw, dict, "document")

    date = parse_date(raw.get("date", ""))
    repo = _expect(raw.get("repo") or {}, dict, "repo")
    tool = _expect(raw.get("scorecard") or {}, dict, "scorecard")
    score = raw.get("score", 0)
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise FormatError("decode json: score must be a number")

    result = Result(
        repo=RepoInfo(
            name=_expect(repo.get("name", ""), str, "repo name"),
            commit_sha=_expect(repo.get("commit", ""), str, "repo commit"),
        ),
        tool=ToolInfo(
            version=_expect(tool.get("version", ""), str, "scorecard version"),
            commit_sha=_expect(tool.get("commit", ""), str, "scorecard commit"),
        ),
        date=date,
        checks=[_check_from_dict(c) for c in _expect(raw.get("checks") or [], list, "checks")],
        metadata=[_expect(m, str, "metadata entry") for m in _expect(raw.get("metadata") or [], list, "metadata")],
    )
    logger.debug("result_decoded", format="v2", checks=len(result.checks))
    return result, float(score)
