"""Finding data models — one observation emitted by a probe."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from riskcard.errors import InvalidFindingError


class Outcome(str, Enum):
    """Result of a single probe observation.

    ``FALSE`` (condition confirmed absent) and ``NOT_AVAILABLE`` (could not
    check) score very differently, so this is never collapsed to a bool.
    """

    TRUE = "True"
    FALSE = "False"
    NOT_APPLICABLE = "NotApplicable"
    NOT_AVAILABLE = "NotAvailable"
    ERROR = "Error"

    @classmethod
    def parse(cls, value: str) -> "Outcome":
        try:
            return cls(value)
        except ValueError:
            raise InvalidFindingError(f"unknown probe outcome: {value!r}") from None


class FileType(str, Enum):
    NONE = "none"
    SOURCE = "source"
    BINARY = "binary"
    TEXT = "text"
    URL = "url"


@dataclass(frozen=True)
class Location:
    """Where a finding was observed."""

    path: str
    type: FileType = FileType.NONE
    line_start: Optional[int] = None
    line_end: Optional[int] = None
    snippet: Optional[str] = None


@dataclass(frozen=True)
class Finding:
    """Immutable record of one detected condition."""

    probe: str
    outcome: Outcome
    message: str = ""
    location: Optional[Location] = None
    values: Dict[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if not self.probe:
            raise InvalidFindingError("finding has an empty probe id")
        if not isinstance(self.outcome, Outcome):
            raise InvalidFindingError(f"invalid outcome type: {self.outcome!r}")

    # ---- (de)serialisation for the findings file ----

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Finding":
        if not isinstance(data, dict):
            raise InvalidFindingError(f"finding must be an object, got {type(data).__name__}")
        loc = data.get("location")
        if loc is not None and not isinstance(loc, dict):
            raise InvalidFindingError(f"location must be an object, got {type(loc).__name__}")
        values = data.get("values")
        if values is not None and not isinstance(values, dict):
            raise InvalidFindingError(f"values must be an object, got {type(values).__name__}")
        location = None
        if loc:
            try:
                file_type = FileType(loc.get("type", "none"))
            except ValueError:
                raise InvalidFindingError(f"unknown file type: {loc.get('type')!r}") from None
            location = Location(
                path=loc.get("path", ""),
                type=file_type,
                line_start=loc.get("lineStart"),
                line_end=loc.get("lineEnd"),
                snippet=loc.get("snippet"),
            )
        return cls(
            probe=data.get("probe", ""),
            outcome=Outcome.parse(data.get("outcome", "")),
            message=data.get("message", ""),
            location=location,
            values=dict(values or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"probe": self.probe, "outcome": self.outcome.value}
        if self.message:
            out["message"] = self.message
        if self.location is not None:
            loc = self.location
            out["location"] = {
                "path": loc.path,
                "type": loc.type.value,
                **({"lineStart": loc.line_start} if loc.line_start is not None else {}),
                **({"lineEnd": loc.line_end} if loc.line_end is not None else {}),
                **({"snippet": loc.snippet} if loc.snippet else {}),
            }
        if self.values:
            out["values"] = dict(self.values)
        return out


def unique_probes_equal(findings: Iterable[Finding], expected: Iterable[str]) -> bool:
    """True if *findings* carry exactly the probe ids in *expected* (no more, no fewer)."""
    seen = {f.probe for f in findings}
    if not seen:
        return False
    return seen == set(expected)
