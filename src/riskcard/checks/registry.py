"""Check registry — maps check names to their evaluation functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from riskcard.checks.logger import DetailLogger
from riskcard.checks.models import CheckResult
from riskcard.config.schema import RiskcardConfig
from riskcard.findings.models import Finding

EvaluateFn = Callable[[str, Sequence[Finding], DetailLogger], CheckResult]


@dataclass
class CheckDefinition:
    """A named check: the probes it consumes and how it scores them."""

    name: str
    probes: Tuple[str, ...]
    evaluate: EvaluateFn
    enabled: bool = True

    def select(self, findings: Sequence[Finding]) -> List[Finding]:
        """Findings produced by this check's probes, in input order."""
        wanted = set(self.probes)
        return [f for f in findings if f.probe in wanted]


class CheckRegistry:
    """Central store for all checks, in catalog order."""

    def __init__(self) -> None:
        self._checks: Dict[str, CheckDefinition] = {}

    # ---- registration ----

    def register(self, check: CheckDefinition) -> None:
        self._checks[check.name] = check

    def register_many(self, checks: list[CheckDefinition]) -> None:
        for c in checks:
            self.register(c)

    # ---- queries ----

    @property
    def all_checks(self) -> List[CheckDefinition]:
        return list(self._checks.values())

    def get(self, name: str) -> Optional[CheckDefinition]:
        return self._checks.get(name)

    def enabled_checks(self) -> List[CheckDefinition]:
        return [c for c in self._checks.values() if c.enabled]

    # ---- config filtering ----

    def apply_config(self, config: RiskcardConfig) -> None:
        """Enable / disable checks based on config.checks."""
        enable_list = config.checks.enable
        disable_list = config.checks.disable

        for check in self._checks.values():
            # If an explicit enable-list exists, only those are enabled
            if enable_list:
                check.enabled = check.name in enable_list
            if check.name in disable_list:
                check.enabled = False


def build_registry(config: Optional[RiskcardConfig] = None) -> CheckRegistry:
    """Create a registry with every built-in check, filtered by *config*."""
    from riskcard.checks.builtin import ALL_BUILTIN_CHECKS

    registry = CheckRegistry()
    # Fresh copies so config filtering never leaks between registries
    registry.register_many(
        [CheckDefinition(c.name, c.probes, c.evaluate) for c in ALL_BUILTIN_CHECKS]
    )
    if config is not None:
        registry.apply_config(config)
    return registry
