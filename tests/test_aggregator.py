"""Tests for score aggregation and one-decimal rendering."""

import pytest

from riskcard.checks.models import CheckResult
from riskcard.docs.catalog import DocCatalog
from riskcard.docs.models import CheckDoc
from riskcard.errors import DocumentationNotFoundError, InternalError
from riskcard.result.aggregator import aggregate_score, format_score, resolve_doc


def _catalog(**risks) -> DocCatalog:
    return DocCatalog({
        name: CheckDoc(name=name, risk=risk, short=f"{name} short")
        for name, risk in risks.items()
    })


def _check(name, score):
    return CheckResult(name=name, score=score, reason="")


class TestAggregateScore:
    def test_weighted_mean(self):
        docs = _catalog(A="Critical", B="Low")
        # (10*10 + 2.5*0) / 12.5
        assert aggregate_score([_check("A", 10), _check("B", 0)], docs) == pytest.approx(8.0)

    def test_sample_result(self, sample_result, catalog):
        # (7.5*8 + 2.5*10 + 7.5*7) / 17.5
        assert sample_result.aggregate_score(catalog) == pytest.approx(137.5 / 17.5)

    def test_inconclusive_excluded(self):
        docs = _catalog(A="High", B="Medium", C="Critical")
        with_inconclusive = aggregate_score([_check("A", 6), _check("B", 9), _check("C", -1)], docs)
        without = aggregate_score([_check("A", 6), _check("B", 9)], docs)
        assert with_inconclusive == without

    def test_all_inconclusive(self):
        docs = _catalog(A="High")
        assert aggregate_score([_check("A", -1)], docs) == -1.0

    def test_no_checks(self):
        assert aggregate_score([], _catalog()) == -1.0

    def test_missing_doc_is_fatal(self):
        docs = _catalog(A="High")
        with pytest.raises(DocumentationNotFoundError):
            aggregate_score([_check("A", 5), _check("Unknown", 5)], docs)

    def test_missing_doc_fatal_even_when_inconclusive(self):
        with pytest.raises(DocumentationNotFoundError):
            aggregate_score([_check("Unknown", -1)], _catalog())

    def test_invalid_risk(self):
        docs = DocCatalog({"A": CheckDoc(name="A", risk="Severe", short="")})
        with pytest.raises(InternalError, match="Invalid risk"):
            aggregate_score([_check("A", 5)], docs)


class TestResolveDoc:
    def test_none_is_not_found(self):
        class NullDocs:
            def get_check(self, name):
                return None

        with pytest.raises(DocumentationNotFoundError):
            resolve_doc(NullDocs(), "A")

    def test_key_error_is_not_found(self):
        class DictDocs:
            def get_check(self, name):
                return {}[name]

        with pytest.raises(DocumentationNotFoundError):
            resolve_doc(DictDocs(), "A")


class TestFormatScore:
    def test_integer_gets_decimal(self):
        assert format_score(8) == "8.0"
        assert format_score(10.0) == "10.0"

    def test_one_decimal(self):
        assert format_score(7.33) == "7.3"
        assert format_score(22 / 3) == "7.3"
        assert format_score(7.86) == "7.9"

    def test_inconclusive(self):
        assert format_score(-1.0) == "-1.0"
