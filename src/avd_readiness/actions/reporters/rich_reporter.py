"""Rich Reporter Implementation."""

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from avd_readiness.actions.reporters.base import BaseReporter
from avd_readiness.model.inventory import HostInventory
from avd_readiness.model.result import ReadinessReport


class RichReporter(BaseReporter):
    """Generates high-fidelity terminal output using Rich."""

    def report_results(self, report: ReadinessReport) -> int:
        table = Table(show_header=True, header_style="bold white", expand=True)
        table.add_column("Check")
        table.add_column("Status", justify="center")
        table.add_column("Details")

        for result in report.results:
            status = "[green]PASS[/]" if result.passed else "[red]FAIL[/]"
            table.add_row(result.name, status, Text(result.detail_message))

        color = "green" if report.overall_passed else "red"
        verdict = "Ready" if report.overall_passed else f"Not ready ({report.failure_count} failing)"

        self.console.print()
        self.console.print(Panel(table, title=f"[{color}]Image readiness: {verdict}[/]", border_style=color))
        return report.exit_code

    def report_host_summary(self, inventory: HostInventory) -> None:
        fp = inventory.fingerprint
        meta = inventory.metadata

        self.console.print()
        self.console.print(Panel.fit(Text(f"VM: {meta.name}"), style="bold cyan"))
        if meta.available:
            self.console.print(f"   Resource group: {escape(meta.resource_group)} ({escape(meta.location)})")
        self.console.print(f"   OS: {escape(fp.caption) or '[dim]unknown[/]'}")
        self.console.print(f"   Architecture: {escape(fp.architecture) or '[dim]unknown[/]'}")
        self.console.print(f"   EditionID: {escape(fp.edition_id) or '[dim]unknown[/]'}  SKU: {fp.sku_label}")
        if inventory.services_available:
            self.console.print(f"   Services: {len(inventory.services)}")
        else:
            self.console.print("   [yellow]! Service inventory unavailable[/]")
