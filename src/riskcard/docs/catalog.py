"""YAML-backed documentation catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import yaml

from riskcard.docs.models import DEFAULT_BASE_URL, RISK_WEIGHTS, CheckDoc
from riskcard.errors import DocumentationNotFoundError, InternalError

BUNDLED_CATALOG = Path(__file__).with_name("checks.yaml")


class DocCatalog:
    """Read-only after construction; safe to share between threads."""

    def __init__(self, docs: Optional[Dict[str, CheckDoc]] = None) -> None:
        self._docs: Dict[str, CheckDoc] = dict(docs or {})

    def get_check(self, name: str) -> CheckDoc:
        doc = self._docs.get(name)
        if doc is None:
            raise DocumentationNotFoundError(name, "no such check in catalog")
        return doc

    def get_checks(self) -> List[CheckDoc]:
        return list(self._docs.values())

    def __contains__(self, name: object) -> bool:
        return name in self._docs

    def __len__(self) -> int:
        return len(self._docs)


def _split_tags(raw) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return [t.strip() for t in raw.split(",") if t.strip()]
    return [str(t) for t in raw]


def parse_catalog(data) -> DocCatalog:
    """Build a catalog from an already-loaded YAML document."""
    if not isinstance(data, dict) or not isinstance(data.get("checks"), dict):
        raise InternalError("documentation catalog must contain a 'checks' mapping")

    base_url = data.get("base_url", DEFAULT_BASE_URL)
    docs: Dict[str, CheckDoc] = {}
    for name, entry in data["checks"].items():
        entry = entry or {}
        risk = entry.get("risk", "")
        if risk not in RISK_WEIGHTS:
            raise InternalError(f"Invalid risk for {name}: '{risk}'")
        remediation = entry.get("remediation") or []
        if isinstance(remediation, str):
            remediation = [remediation]
        docs[name] = CheckDoc(
            name=name,
            risk=risk,
            short=(entry.get("short") or "").strip(),
            description=(entry.get("description") or "").strip(),
            remediation=[str(r).strip() for r in remediation],
            tags=_split_tags(entry.get("tags")),
            base_url=base_url,
        )
    return DocCatalog(docs)


def load_catalog(path: Optional[Path] = None) -> DocCatalog:
    """Load a catalog from *path*, or the bundled one."""
    path = path or BUNDLED_CATALOG
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise InternalError(f"load documentation catalog {path}: {exc}") from exc
    return parse_catalog(data)
