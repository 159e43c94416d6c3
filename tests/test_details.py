"""Tests for log-level-aware detail rendering and parsing."""

import pytest

from riskcard.checks.models import CheckDetail, LogMessage
from riskcard.config.schema import level_at_or_above
from riskcard.findings.models import FileType
from riskcard.result.details import detail_to_string, string_to_detail


def _detail(type_="warn", **msg):
    msg.setdefault("text", "binary detected")
    return CheckDetail(type=type_, msg=LogMessage(**msg))


class TestLevels:
    def test_ordering(self):
        assert level_at_or_above("warn", "info") is True
        assert level_at_or_above("debug", "info") is False
        assert level_at_or_above("error", "debug") is True


class TestDetailToString:
    def test_text_only(self):
        assert detail_to_string(_detail()) == "Warn: binary detected"

    def test_with_path(self):
        assert detail_to_string(_detail(path="a/b.exe")) == "Warn: binary detected: a/b.exe"

    def test_with_offset(self):
        assert detail_to_string(_detail(path="a/b.exe", offset=7)) == "Warn: binary detected: a/b.exe:7"

    def test_with_range(self):
        rendered = detail_to_string(_detail(path="wf.yml", offset=7, end_offset=12))
        assert rendered == "Warn: binary detected: wf.yml:7-12"

    def test_debug_hidden_at_default_level(self):
        assert detail_to_string(_detail("debug")) == ""

    def test_debug_shown_at_debug_level(self):
        assert detail_to_string(_detail("debug"), "debug") == "Debug: binary detected"

    def test_info_hidden_at_warn_level(self):
        assert detail_to_string(_detail("info"), "warn") == ""
        assert detail_to_string(_detail("warn"), "warn") == "Warn: binary detected"


class TestStringToDetail:
    @pytest.mark.parametrize(
        "detail",
        [
            _detail("warn"),
            _detail("info", path="LICENSE"),
            _detail("debug", path="src/main.c", offset=3),
            _detail("warn", path=".github/workflows/ci.yml", offset=10, end_offset=14),
        ],
    )
    def test_inverse_of_rendering(self, detail):
        assert string_to_detail(detail_to_string(detail, "debug")) == detail

    def test_file_type_is_lost(self):
        original = _detail(path="bin/tool", type=FileType.BINARY, offset=1)
        parsed = string_to_detail(detail_to_string(original))
        assert parsed.msg.type == FileType.NONE
        assert (parsed.msg.text, parsed.msg.path, parsed.msg.offset) == ("binary detected", "bin/tool", 1)

    def test_unknown_prefix(self):
        parsed = string_to_detail("Note: something")
        assert parsed.type == "info"
        assert parsed.msg.text == "Note: something"

    def test_colon_in_path_without_offset(self):
        parsed = string_to_detail("Info: fetched: https://example.com/x")
        assert parsed.msg.path == "https://example.com/x"
        assert parsed.msg.offset == 0

    def test_colon_in_text_becomes_location(self):
        original = _detail(text="Project is vulnerable to: GHSA-1")
        parsed = string_to_detail(detail_to_string(original))
        assert (parsed.msg.text, parsed.msg.path) == ("Project is vulnerable to", "GHSA-1")
        assert parsed != original
