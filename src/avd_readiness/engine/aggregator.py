"""Readiness aggregator - Runs every check and builds the report."""

import logging
from collections.abc import Sequence

# Imported for registration side effects.
import avd_readiness.checks.architecture  # noqa: F401
import avd_readiness.checks.edition  # noqa: F401
import avd_readiness.checks.services  # noqa: F401
from avd_readiness.checks import CheckContext, run_checks
from avd_readiness.config import ReadinessConfig
from avd_readiness.model.inventory import OsFingerprint, ServiceRecord
from avd_readiness.model.result import ReadinessReport

logger = logging.getLogger(__name__)


class ReadinessAggregator:
    """Composes the architecture, edition and service checks.

    All checks always run, so one report reflects the complete checklist
    even when an early check fails.

    Example:
        >>> aggregator = ReadinessAggregator(ReadinessConfig())
        >>> report = aggregator.run(fingerprint, services)
        >>> report.overall_passed
    """

    def __init__(self, config: ReadinessConfig | None = None) -> None:
        self.config = config or ReadinessConfig()

    def run(
        self,
        fp: OsFingerprint,
        services: Sequence[ServiceRecord] | None = None,
        config: ReadinessConfig | None = None,
        *,
        services_available: bool = True,
    ) -> ReadinessReport:
        context = CheckContext(
            fingerprint=fp,
            config=config or self.config,
            services=list(services or []),
            services_available=services_available,
        )
        results = run_checks(context)
        report = ReadinessReport(results=tuple(results))
        logger.debug(
            "Readiness evaluated: %d checks, %d failing",
            len(report.results),
            report.failure_count,
        )
        return report
