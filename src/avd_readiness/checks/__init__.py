"""Check plugin system for avd-readiness.

Each readiness check is a class registered with @register_check. Checks are
pure: they read the CheckContext and return exactly one CheckResult.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from avd_readiness.model.result import CheckResult

if TYPE_CHECKING:
    from avd_readiness.config import ReadinessConfig
    from avd_readiness.model.inventory import OsFingerprint, ServiceRecord

logger = logging.getLogger(__name__)


@dataclass
class CheckContext:
    """Context passed to all checks.

    Provides read-only access to the collected inventory and the run config.
    """
    fingerprint: "OsFingerprint"
    config: "ReadinessConfig"
    services: list["ServiceRecord"] = field(default_factory=list)
    services_available: bool = True


class BaseCheck(ABC):
    """Abstract base class for all checks.

    Each check must implement:
    - run(context) -> CheckResult
    """

    # Lower runs first; keeps report ordering stable.
    order: int = 100

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable check identifier used in reports."""
        ...

    @abstractmethod
    def run(self, context: CheckContext) -> CheckResult:
        """Evaluate the check against the context."""
        ...


# Registry of all available checks
_check_registry: list[type[BaseCheck]] = []


def register_check(check_class: type[BaseCheck]) -> type[BaseCheck]:
    """Decorator to register a check class."""
    if check_class not in _check_registry:
        _check_registry.append(check_class)
    return check_class


def get_all_checks() -> list[type[BaseCheck]]:
    """Get all registered check classes in evaluation order."""
    return sorted(_check_registry, key=lambda cls: cls.order)


def run_checks(context: CheckContext, checks: list[type[BaseCheck]] | None = None) -> list[CheckResult]:
    """Run every check and return one result per check.

    Never stops early: a check that raises is reported as a failing result
    so the remaining checks still run.
    """
    results: list[CheckResult] = []

    for check_class in checks if checks is not None else get_all_checks():
        check = check_class()
        try:
            results.append(check.run(context))
        except Exception as e:
            logger.exception("Check %s failed to evaluate", check.name)
            results.append(CheckResult(
                name=check.name,
                passed=False,
                detail_message=f"Check could not be evaluated: {e}",
            ))

    return results
