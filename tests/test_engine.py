"""Tests for the analysis engine."""

from datetime import timezone
from pathlib import Path

from riskcard import __version__
from riskcard.config.annotations import AnnotationConfig
from riskcard.config.schema import ChecksConfig, RiskcardConfig
from riskcard.engine import analyze
from riskcard.findings.loader import FindingsDocument, load_findings


class TestAnalyze:
    def test_builds_result(self, findings_file: Path, catalog):
        result = analyze(load_findings(findings_file))
        assert result.repo.name == "github.com/example/project"
        assert result.tool.version == __version__
        assert result.metadata == ["tier:1"]
        assert result.get_check("License").score == 10
        assert result.aggregate_score(catalog) == 9.25

    def test_respects_disabled_checks(self, findings_file: Path):
        cfg = RiskcardConfig(checks=ChecksConfig(disable=["Vulnerabilities", "Dangerous-Workflow"]))
        result = analyze(load_findings(findings_file), cfg)
        assert [c.name for c in result.checks] == ["Binary-Artifacts", "License"]

    def test_defaults_date_to_now_utc(self):
        result = analyze(FindingsDocument(repo_name="r"))
        assert result.date.tzinfo == timezone.utc
        assert isinstance(result.config, AnnotationConfig)
