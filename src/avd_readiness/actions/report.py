"""Report Action - Publish readiness results.

CONTRACT:
- read_only: True (on the assessed host; writes only the run log)
- requires_backup: False
- rollback_support: N/A
- prerequisites: None
"""

import logging

import click
from rich.console import Console

from avd_readiness import __version__
from avd_readiness.actions.reporters import REPORTERS, BaseReporter
from avd_readiness.model.inventory import HostInventory
from avd_readiness.model.result import ReadinessReport


class ReportAction:
    """Write results to the run log, the console, and the summary line.

    The summary line is always the last thing written to stdout so an
    orchestrator reading process output sees one terminal status.
    """

    def __init__(
        self,
        console: Console | None = None,
        format_mode: str = "plain",
        quiet: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.console = console or Console()
        self.format_mode = format_mode
        self.quiet = quiet
        self.logger = logger or logging.getLogger("avd_readiness.report")
        self.reporter: BaseReporter = REPORTERS.get(format_mode, REPORTERS["plain"])(self.console)

    def log_start(self) -> None:
        """First log line of a run; call before collecting inventory."""
        self.logger.info("avd-readiness %s", __version__)

    def log_header(self, inventory: HostInventory) -> None:
        """Record run context: VM identity and collected signals."""
        meta = inventory.metadata
        fp = inventory.fingerprint
        self.logger.info(
            "VM: %s, resource group: %s, subscription: %s, location: %s",
            meta.name, meta.resource_group, meta.subscription_id, meta.location,
        )
        self.logger.info(
            "OS: architecture=%s, EditionID=%s, SKU=%s, caption=%s",
            fp.architecture or "<unknown>", fp.edition_id or "<unknown>",
            fp.sku_label, fp.caption or "<unknown>",
        )
        if inventory.services_available:
            self.logger.info("Services collected: %d", len(inventory.services))
        else:
            self.logger.info("Services collected: unavailable")

    def log_report(self, report: ReadinessReport) -> None:
        """Record each check result and the summary line."""
        for result in report.results:
            level = logging.INFO if result.passed else logging.ERROR
            self.logger.log(level, "%s", result)
        self.logger.info("%s", report.summary_line())

    def publish(self, inventory: HostInventory, report: ReadinessReport) -> int:
        """Log, print, and return the process exit code."""
        self.log_header(inventory)
        self.log_report(report)

        if not self.quiet:
            self.reporter.report_host_summary(inventory)
            self.reporter.report_results(report)

        click.echo(report.summary_line())
        return report.exit_code
