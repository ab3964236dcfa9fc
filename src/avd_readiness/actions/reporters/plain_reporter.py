"""Plain Text Reporter Implementation."""

from avd_readiness.actions.reporters.base import BaseReporter
from avd_readiness.model.inventory import HostInventory
from avd_readiness.model.result import ReadinessReport


class PlainReporter(BaseReporter):
    """Generates clean, text-only output."""

    def report_results(self, report: ReadinessReport) -> int:
        self.console.print()
        self.console.print("READINESS RESULTS")
        self.console.print(
            f"Summary: {len(report.results) - report.failure_count} passed, "
            f"{report.failure_count} failed"
        )
        self.console.print()

        for result in report.results:
            self.console.print(str(result), markup=False, highlight=False, soft_wrap=True)

        return report.exit_code

    def report_host_summary(self, inventory: HostInventory) -> None:
        fp = inventory.fingerprint
        meta = inventory.metadata
        lines = [
            f"VM: {meta.name} (resource group: {meta.resource_group})",
            f"OS: {fp.caption or 'unknown'}",
            f"Architecture: {fp.architecture or 'unknown'}",
            f"EditionID: {fp.edition_id or 'unknown'}, SKU: {fp.sku_label}",
        ]
        if inventory.services_available:
            lines.append(f"Services: {len(inventory.services)} installed")
        else:
            lines.append("Services: unavailable")
        for line in lines:
            self.console.print(line, markup=False, highlight=False, soft_wrap=True)
