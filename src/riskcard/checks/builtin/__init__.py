"""Built-in checks — catalog order."""

from riskcard.checks.builtin.binary_artifacts import BINARY_ARTIFACTS
from riskcard.checks.builtin.dangerous_workflow import DANGEROUS_WORKFLOW
from riskcard.checks.builtin.license import LICENSE
from riskcard.checks.builtin.vulnerabilities import VULNERABILITIES
from riskcard.checks.registry import CheckDefinition

ALL_BUILTIN_CHECKS: list[CheckDefinition] = [
    BINARY_ARTIFACTS,
    DANGEROUS_WORKFLOW,
    LICENSE,
    VULNERABILITIES,
]

__all__ = ["ALL_BUILTIN_CHECKS"]
