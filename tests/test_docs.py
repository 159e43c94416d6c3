"""Tests for the documentation catalog."""

from pathlib import Path

import pytest

from riskcard.docs.catalog import load_catalog, parse_catalog
from riskcard.docs.models import CheckDoc
from riskcard.errors import DocumentationNotFoundError, InternalError


class TestCheckDoc:
    def test_url_pins_commit(self):
        doc = CheckDoc(name="Binary-Artifacts", risk="High", short="")
        assert doc.get_documentation_url("abc123") == (
            "https://github.com/ossf/scorecard/blob/abc123/docs/checks.md#binary-artifacts"
        )

    @pytest.mark.parametrize("commit", ["", "unknown"])
    def test_unknown_commit_uses_main(self, commit):
        doc = CheckDoc(name="License", risk="Low", short="")
        assert "/blob/main/" in doc.get_documentation_url(commit)


class TestCatalog:
    def test_bundled_has_builtin_checks(self, catalog):
        for name in ("Binary-Artifacts", "Dangerous-Workflow", "License", "Vulnerabilities"):
            assert name in catalog
        assert catalog.get_check("Dangerous-Workflow").get_risk() == "Critical"

    def test_unknown_check(self, catalog):
        with pytest.raises(DocumentationNotFoundError):
            catalog.get_check("Does-Not-Exist")

    def test_custom_catalog(self, tmp_path: Path):
        path = tmp_path / "checks.yaml"
        path.write_text(
            "base_url: https://example.com/riskcard\n"
            "checks:\n"
            "  Custom-Check:\n"
            "    risk: Medium\n"
            "    tags: a, b\n"
            "    short: A custom check.\n"
            "    remediation: Fix it.\n"
        )
        catalog = load_catalog(path)
        doc = catalog.get_check("Custom-Check")
        assert doc.tags == ["a", "b"]
        assert doc.remediation == ["Fix it."]
        assert doc.get_documentation_url("v1") == "https://example.com/riskcard/blob/v1/docs/checks.md#custom-check"

    def test_invalid_risk(self):
        with pytest.raises(InternalError):
            parse_catalog({"checks": {"X": {"risk": "Extreme", "short": ""}}})

    def test_missing_checks_mapping(self):
        with pytest.raises(InternalError):
            parse_catalog({"base_url": "x"})

    def test_unreadable_file(self, tmp_path: Path):
        with pytest.raises(InternalError):
            load_catalog(tmp_path / "missing.yaml")
