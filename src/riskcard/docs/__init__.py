"""Check documentation — risk classification, short descriptions, links."""

from riskcard.docs.catalog import DocCatalog, load_catalog, parse_catalog
from riskcard.docs.models import RISK_WEIGHTS, CheckDoc, DocLookup

__all__ = ["RISK_WEIGHTS", "CheckDoc", "DocCatalog", "DocLookup", "load_catalog", "parse_catalog"]
