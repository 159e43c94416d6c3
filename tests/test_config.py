"""Tests for config loading, env var overrides, and repository annotations."""

from pathlib import Path

import pytest

from riskcard.checks.models import CheckResult
from riskcard.config.annotations import load_annotations, parse_annotations
from riskcard.config.loader import ConfigError, load_config


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.output.format == "v2"
        assert cfg.output.log_level == "info"
        assert cfg.output.show_details is False
        assert cfg.checks.enable == []

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".riskcard.toml").write_text(
            'version = "1.0"\n'
            '[output]\n'
            'format = "v1"\n'
            'log_level = "debug"\n'
            'unknown_key = 1\n'
            '[checks]\n'
            'disable = ["License"]\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.output.format == "v1"
        assert cfg.output.log_level == "debug"
        assert cfg.checks.disable == ["License"]

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[docs]\ncatalog = "my-checks.yaml"\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.docs.catalog == "my-checks.yaml"

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".riskcard.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_format_raises(self, tmp_path: Path):
        (tmp_path / ".riskcard.toml").write_text('[output]\nformat = "xml"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("RISKCARD_FORMAT", "v1")
        assert load_config(tmp_path).output.format == "v1"

    def test_log_level_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("RISKCARD_LOG_LEVEL", "debug")
        assert load_config(tmp_path).output.log_level == "debug"

    def test_disable_checks_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("RISKCARD_DISABLE_CHECKS", "License, Vulnerabilities")
        assert load_config(tmp_path).checks.disable == ["License", "Vulnerabilities"]

    def test_show_details_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("RISKCARD_SHOW_DETAILS", "1")
        assert load_config(tmp_path).output.show_details is True

    def test_invalid_env_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("RISKCARD_FORMAT", "xml")
        assert load_config(tmp_path).output.format == "v2"


class TestAnnotations:
    def test_case_insensitive_match(self):
        cfg = parse_annotations({
            "annotations": [
                {"checks": ["BINARY-ARTIFACTS", "license"], "reasons": [{"reason": "test-data"}]},
                {"checks": ["binary-artifacts"], "reasons": [{"reason": "remediated"}]},
            ]
        })
        assert cfg.reasons_for("Binary-Artifacts") == [
            "The files and code are only used for testing purposes.",
            "The vulnerability has been remediated.",
        ]
        assert cfg.reasons_for("Vulnerabilities") == []

    def test_unknown_reason(self):
        with pytest.raises(ConfigError):
            parse_annotations({"annotations": [{"checks": ["x"], "reasons": [{"reason": "because"}]}]})

    def test_empty_document(self):
        assert parse_annotations(None).annotations == []

    def test_missing_file(self, tmp_path: Path):
        assert load_annotations(tmp_path / "riskcard.yml").annotations == []

    def test_load_file(self, tmp_path: Path):
        path = tmp_path / "riskcard.yml"
        path.write_text(
            "annotations:\n"
            "  - checks:\n"
            "      - vulnerabilities\n"
            "    reasons:\n"
            "      - reason: not-detected\n"
        )
        assert len(load_annotations(path).reasons_for("Vulnerabilities")) == 1

    def test_max_score_never_annotated(self):
        cfg = parse_annotations({"annotations": [{"checks": ["license"], "reasons": [{"reason": "test-data"}]}]})
        assert CheckResult(name="License", score=10, reason="").annotations(cfg) == []
        assert len(CheckResult(name="License", score=4, reason="").annotations(cfg)) == 1
