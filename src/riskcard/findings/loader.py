"""Read a findings document produced by the probe layer."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional

from riskcard.errors import InvalidFindingError
from riskcard.findings.models import Finding


@dataclass
class FindingsDocument:
    """Findings for one repository snapshot, plus its identity."""

    repo_name: str
    repo_commit: str = ""
    date: Optional[datetime] = None
    metadata: List[str] = field(default_factory=list)
    findings: List[Finding] = field(default_factory=list)


def _parse_date(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as exc:
        raise InvalidFindingError(f"invalid date {value!r}: {exc}") from exc
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def parse_findings_document(data: Any) -> FindingsDocument:
    """Accept either ``{"repo": ..., "findings": [...]}`` or a bare findings list."""
    if isinstance(data, list):
        data = {"findings": data}
    if not isinstance(data, dict):
        raise InvalidFindingError("findings document must be an object or a list")

    repo = data.get("repo") or {}
    if not isinstance(repo, dict):
        raise InvalidFindingError("'repo' must be an object")
    raw_findings = data.get("findings") or []
    if not isinstance(raw_findings, list):
        raise InvalidFindingError("'findings' must be a list")

    return FindingsDocument(
        repo_name=str(repo.get("name", "")),
        repo_commit=str(repo.get("commit", "")),
        date=_parse_date(data.get("date")),
        metadata=[str(m) for m in data.get("metadata") or []],
        findings=[Finding.from_dict(f) for f in raw_findings],
    )


def load_findings(path: Path) -> FindingsDocument:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise InvalidFindingError(f"{path}: invalid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise InvalidFindingError(f"{path}: not UTF-8: {exc}") from exc
    return parse_findings_document(data)
