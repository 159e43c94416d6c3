"""riskcard — check evaluation, scoring, and versioned result interchange."""

__version__ = "0.3.0"
