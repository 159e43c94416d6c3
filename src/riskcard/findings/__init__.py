"""Finding models emitted by probes."""

from riskcard.findings.models import FileType, Finding, Location, Outcome, unique_probes_equal

__all__ = ["FileType", "Finding", "Location", "Outcome", "unique_probes_equal"]
