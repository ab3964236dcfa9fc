"""JSON Reporter Implementation."""

import json
from dataclasses import asdict

from avd_readiness.actions.reporters.base import BaseReporter
from avd_readiness.model.inventory import HostInventory
from avd_readiness.model.result import ReadinessReport


class JsonReporter(BaseReporter):
    """Generates machine-readable JSON output."""

    def report_results(self, report: ReadinessReport) -> int:
        self.console.print_json(json.dumps(report.to_dict()))
        return report.exit_code

    def report_host_summary(self, inventory: HostInventory) -> None:
        data = {
            "fingerprint": asdict(inventory.fingerprint),
            "metadata": asdict(inventory.metadata),
            "services_available": inventory.services_available,
            "service_count": len(inventory.services),
        }
        self.console.print_json(json.dumps(data))
