"""Log-level-aware rendering of check details, and its inverse.

Rendered form::

    <Type>: <text>[: <path>[:<line>[-<end line>]]]

``string_to_detail`` recovers type, text, path and line range. It cannot
recover the location's file type, snippet or remediation (never rendered).
The first ``": "`` after the type prefix ends the text, so a text that
itself contains ``": "`` is split there and the remainder decodes as a
location, whether or not the original detail had one.
Unknown type prefixes decode as ``info`` with the whole string as text.
"""

from __future__ import annotations

import re
from typing import Dict

from riskcard.checks.models import CheckDetail, DetailType, LogMessage
from riskcard.config.schema import DEFAULT_LOG_LEVEL, level_at_or_above

_TYPE_TO_TEXT: Dict[str, str] = {
    "info": "Info",
    "warn": "Warn",
    "debug": "Debug",
}
_TEXT_TO_TYPE: Dict[str, DetailType] = {v: k for k, v in _TYPE_TO_TEXT.items()}  # type: ignore[misc]

_LOCATION_RE = re.compile(r"^(?P<path>.*?)(?::(?P<offset>\d+)(?:-(?P<end>\d+))?)?$")


def detail_to_string(detail: CheckDetail, log_level: str = DEFAULT_LOG_LEVEL) -> str:
    """Render *detail*, or return ``""`` if it is below *log_level*."""
    if not level_at_or_above(detail.type, log_level):
        return ""

    msg = detail.msg
    out = f"{_TYPE_TO_TEXT[detail.type]}: {msg.text}"
    if msg.path:
        out += f": {msg.path}"
        if msg.offset:
            out += f":{msg.offset}"
            if msg.end_offset and msg.offset < msg.end_offset:
                out += f"-{msg.end_offset}"
    return out


def string_to_detail(text: str) -> CheckDetail:
    """Parse a rendered detail back into a structured entry."""
    segments = text.split(": ", 2)
    detail_type = _TEXT_TO_TYPE.get(segments[0])
    if detail_type is None or len(segments) < 2:
        return CheckDetail(type=detail_type or "info", msg=LogMessage(text=text))

    body = segments[1]
    if len(segments) < 3:
        return CheckDetail(type=detail_type, msg=LogMessage(text=body))

    loc = _LOCATION_RE.match(segments[2])
    assert loc is not None  # the pattern matches any string
    return CheckDetail(
        type=detail_type,
        msg=LogMessage(
            text=body,
            path=loc.group("path"),
            offset=int(loc.group("offset") or 0),
            end_offset=int(loc.group("end") or 0),
        ),
    )
