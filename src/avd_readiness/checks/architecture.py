"""Architecture check.

Virtual desktop images must run a 64-bit x64 operating system.
"""

from avd_readiness.checks import BaseCheck, CheckContext, register_check
from avd_readiness.model.result import CheckResult

SUPPORTED_ARCHITECTURE = "AMD64"


@register_check
class ArchitectureCheck(BaseCheck):
    """Passes only for the AMD64 processor architecture token."""

    order = 10

    @property
    def name(self) -> str:
        return "os-architecture"

    def run(self, context: CheckContext) -> CheckResult:
        return self.evaluate(context.fingerprint.architecture)

    def evaluate(self, architecture: str | None) -> CheckResult:
        if architecture == SUPPORTED_ARCHITECTURE:
            return CheckResult(
                name=self.name,
                passed=True,
                detail_message=f"OS architecture {architecture} is supported",
            )

        observed = architecture if architecture else "<unknown>"
        return CheckResult(
            name=self.name,
            passed=False,
            detail_message=(
                f"Unsupported OS architecture '{observed}' "
                f"(64-bit {SUPPORTED_ARCHITECTURE} required)"
            ),
        )
