"""Conflicting services check.

Finds installed services published by vendors whose agents conflict with
the virtual desktop agent. Two independent exclusions exist:

- exclude_by_name: specific first-party client app services.
- exclude_prefix_regex: a vendor's client product, matched on name or
  display name.
"""

import re
from collections.abc import Collection, Iterable

from avd_readiness.checks import BaseCheck, CheckContext, register_check
from avd_readiness.engine.matching import exclude_names, exclude_regex, match_services
from avd_readiness.model.inventory import ServiceRecord
from avd_readiness.model.result import CheckResult


@register_check
class ServiceConflictScanner(BaseCheck):
    """Fails when any non-excluded service matches a publisher pattern."""

    order = 30

    @property
    def name(self) -> str:
        return "conflicting-services"

    def run(self, context: CheckContext) -> CheckResult:
        result = self.evaluate(
            context.services,
            context.config.publishers,
            exclude_by_name=context.config.exclude_by_name,
            exclude_prefix_regex=context.config.exclude_prefix_regex,
        )
        if result.passed and not context.services_available:
            return CheckResult(
                name=result.name,
                passed=True,
                detail_message=f"{result.detail_message} (service inventory unavailable)",
            )
        return result

    def find_conflicts(
        self,
        services: Iterable[ServiceRecord] | None,
        patterns: Iterable[str] | None,
        exclude_by_name: Collection[str] | None = None,
        exclude_prefix_regex: str | None = None,
    ) -> list[ServiceRecord]:
        """Return conflicting services sorted by name.

        Raises:
            re.error: If exclude_prefix_regex does not compile.
        """
        matches = match_services(services or [], patterns or [])
        if exclude_by_name:
            matches = exclude_names(matches, exclude_by_name)
        if exclude_prefix_regex:
            matches = exclude_regex(matches, exclude_prefix_regex)
        return [matches[name] for name in sorted(matches)]

    def evaluate(
        self,
        services: Iterable[ServiceRecord] | None,
        patterns: Iterable[str] | None,
        exclude_by_name: Collection[str] | None = None,
        exclude_prefix_regex: str | None = None,
    ) -> CheckResult:
        try:
            conflicts = self.find_conflicts(services, patterns, exclude_by_name, exclude_prefix_regex)
        except re.error as e:
            return CheckResult(
                name=self.name,
                passed=False,
                detail_message=f"Invalid exclusion pattern '{exclude_prefix_regex}': {e}",
            )

        if not conflicts:
            return CheckResult(
                name=self.name,
                passed=True,
                detail_message="No conflicting services found",
            )

        labels = sorted({svc.label for svc in conflicts})
        return CheckResult(
            name=self.name,
            passed=False,
            detail_message=f"Conflicting services found: {', '.join(labels)}",
        )
