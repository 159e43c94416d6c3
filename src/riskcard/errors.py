"""Error taxonomy shared by evaluation, aggregation, and the codecs."""

from __future__ import annotations


class RiskcardError(Exception):
    """Base class for all riskcard errors."""


class InternalError(RiskcardError):
    """A pipeline invariant was violated or an encode step failed.

    The caller cannot have produced this by passing bad user input — it
    always points at a defect upstream (missing findings, missing docs,
    I/O failure while writing a result).
    """


class DocumentationNotFoundError(InternalError):
    """A check name has no entry in the documentation catalog."""

    def __init__(
        self,
        check_name: str,
        detail: str = "lookup returned no documentation",
        operation: str = "",
    ) -> None:
        self.check_name = check_name
        self.detail = detail
        self.operation = operation
        message = f"documentation not found for {check_name}: {detail}"
        super().__init__(f"{operation}: {message}" if operation else message)


class InvalidFindingError(RiskcardError):
    """A finding record is malformed (empty probe, unknown outcome)."""


class FormatError(RiskcardError):
    """A serialized result could not be decoded."""


class DateFormatError(FormatError):
    """The analysis date of a serialized result has an unexpected format."""
