"""Shared test fixtures — findings, check results, catalogs, results."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
import structlog

from riskcard.checks.models import CheckDetail, CheckResult, LogMessage
from riskcard.config.annotations import parse_annotations
from riskcard.docs.catalog import load_catalog
from riskcard.findings.models import FileType, Finding, Location, Outcome
from riskcard.result.models import RepoInfo, Result, ToolInfo


@pytest.fixture(autouse=True)
def _reset_structlog():
    """The CLI configures structlog globally; undo it between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def binary_finding() -> Finding:
    """An unverified binary at a known location."""
    return Finding(
        probe="hasUnverifiedBinaryArtifacts",
        outcome=Outcome.TRUE,
        location=Location(path="path", type=FileType.BINARY, line_start=123),
    )


@pytest.fixture
def catalog():
    """The bundled documentation catalog."""
    return load_catalog()


@pytest.fixture
def sample_result() -> Result:
    """A result with a mix of scored, perfect, and inconclusive checks."""
    binary_details = (
        CheckDetail(
            type="warn",
            msg=LogMessage(text="binary detected", path="bin/tool.exe", type=FileType.BINARY, offset=3),
        ),
        CheckDetail(type="warn", msg=LogMessage(text="binary detected", path="lib/a.so")),
        CheckDetail(type="debug", msg=LogMessage(text="scanned 42 files")),
    )
    return Result(
        repo=RepoInfo(name="github.com/example/project", commit_sha="a1b2c3d4"),
        tool=ToolInfo(version="v0.3.0", commit_sha="deadbeef"),
        date=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        checks=[
            CheckResult(
                name="Binary-Artifacts",
                score=8,
                reason="binaries present in source code",
                details=binary_details,
            ),
            CheckResult(name="License", score=10, reason="license file detected"),
            CheckResult(name="Dangerous-Workflow", score=-1, reason="no workflows found"),
            CheckResult(name="Vulnerabilities", score=7, reason="3 existing vulnerabilities detected"),
        ],
        metadata=["tier:1", "team:infra"],
        config=parse_annotations({
            "annotations": [
                {"checks": ["binary-artifacts"], "reasons": [{"reason": "test-data"}]},
            ]
        }),
    )


@pytest.fixture
def findings_file(tmp_path: Path) -> Path:
    """A findings document with one unverified binary."""
    path = tmp_path / "findings.json"
    path.write_text(json.dumps({
        "repo": {"name": "github.com/example/project", "commit": "a1b2c3d4"},
        "date": "2024-01-02T00:00:00Z",
        "metadata": ["tier:1"],
        "findings": [
            {
                "probe": "hasUnverifiedBinaryArtifacts",
                "outcome": "True",
                "location": {"path": "bin/tool.exe", "type": "binary", "lineStart": 1},
            },
            {"probe": "hasLicenseFile", "outcome": "True", "location": {"path": "LICENSE", "type": "text"}},
            {"probe": "hasFSFOrOSIApprovedLicense", "outcome": "True"},
            {"probe": "hasLicenseFileAtTopDir", "outcome": "True"},
        ],
    }))
    return path
