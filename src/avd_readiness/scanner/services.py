"""Service Scanner - Lists installed services from the service manager."""

import json
import logging
from dataclasses import dataclass, field

from avd_readiness.connector.local import LocalConnector
from avd_readiness.model.inventory import ServiceRecord

logger = logging.getLogger(__name__)

SERVICE_QUERY = "Get-Service | Select-Object Name, DisplayName | ConvertTo-Json -Compress"


@dataclass
class ServiceScanResult:
    """Raw service scan results."""

    services: list[ServiceRecord] = field(default_factory=list)
    available: bool = True


class ServiceScanner:
    """Scanner for installed services.

    An unavailable service list is reported as empty with available=False;
    the conflict check then cannot find anything, which is surfaced in its
    message rather than treated as an error.
    """

    def __init__(self, connector: LocalConnector) -> None:
        self.connector = connector

    def scan(self) -> ServiceScanResult:
        result = self.connector.powershell(SERVICE_QUERY)
        if not result.success:
            logger.warning("Service list query failed: %s", result.stderr.strip() or result.exit_code)
            return ServiceScanResult(available=False)

        if not result.stdout.strip():
            return ServiceScanResult()

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError:
            logger.warning("Service list query returned unparseable output")
            return ServiceScanResult(available=False)

        # ConvertTo-Json emits a bare object for a single service
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            return ServiceScanResult(available=False)

        return ServiceScanResult(services=self._parse_entries(data))

    def _parse_entries(self, entries: list) -> list[ServiceRecord]:
        services = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            name = str(entry.get("Name") or "").strip()
            if not name:
                continue
            services.append(ServiceRecord(
                name=name,
                display_name=str(entry.get("DisplayName") or "").strip(),
            ))
        return services
