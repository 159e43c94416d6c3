"""Result container, aggregation, and detail rendering."""

from riskcard.result.aggregator import aggregate_score, format_score, resolve_doc
from riskcard.result.details import detail_to_string, string_to_detail
from riskcard.result.models import RepoInfo, Result, ToolInfo

__all__ = [
    "RepoInfo",
    "Result",
    "ToolInfo",
    "aggregate_score",
    "detail_to_string",
    "format_score",
    "resolve_doc",
    "string_to_detail",
]
