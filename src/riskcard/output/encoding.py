"""Shared serialisation for the JSON wire formats."""

from __future__ import annotations

import json
from typing import IO, Any, Dict


def dumps(doc: Dict[str, Any]) -> str:
    """Compact, key-order-preserving JSON with one trailing newline."""
    return json.dumps(doc, ensure_ascii=False, separators=(",", ":"), allow_nan=False) + "\n"


def write_all(text: str, writer: IO[str]) -> None:
    """Write a fully rendered document in one call."""
    writer.write(text)
    flush = getattr(writer, "flush", None)
    if flush is not None:
        flush()
