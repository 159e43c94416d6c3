"""Analysis engine: findings in, complete Result out."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Optional

import structlog

from riskcard import __version__
from riskcard.checks.registry import CheckRegistry, build_registry
from riskcard.checks.runner import run_checks
from riskcard.config.annotations import AnnotationConfig
from riskcard.config.schema import RiskcardConfig
from riskcard.findings.loader import FindingsDocument
from riskcard.result.models import RepoInfo, Result, ToolInfo

logger = structlog.get_logger()


def analyze(
    document: FindingsDocument,
    config: Optional[RiskcardConfig] = None,
    annotations: Optional[AnnotationConfig] = None,
    registry: Optional[CheckRegistry] = None,
    tool: Optional[ToolInfo] = None,
) -> Result:
    """Evaluate every enabled check over *document* and assemble the Result.

    Findings are consumed here and never stored on the Result.
    """
    config = config or RiskcardConfig()
    registry = registry or build_registry(config)
    start = time.perf_counter()

    checks = run_checks(document.findings, registry, max_workers=config.checks.max_workers)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "analysis_complete",
        repo=document.repo_name,
        checks=len(checks),
        findings=len(document.findings),
        duration_ms=round(elapsed, 2),
    )

    return Result(
        repo=RepoInfo(name=document.repo_name, commit_sha=document.repo_commit),
        tool=tool or ToolInfo(version=__version__, commit_sha="unknown"),
        date=document.date or datetime.now(timezone.utc),
        checks=checks,
        metadata=list(document.metadata),
        config=annotations or AnnotationConfig(),
    )
