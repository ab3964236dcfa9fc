"""Shared collect + evaluate pipeline.

Public API:
    collect_inventory(connector) -> HostInventory
    run_readiness(inventory, config) -> ReadinessReport
"""

import logging
from typing import Callable

from avd_readiness.config import ReadinessConfig
from avd_readiness.connector.local import LocalConnector
from avd_readiness.engine.aggregator import ReadinessAggregator
from avd_readiness.model.inventory import HostInventory, VMMetadata
from avd_readiness.model.result import ReadinessReport
from avd_readiness.scanner.metadata import MetadataScanner
from avd_readiness.scanner.os_info import OSScanner
from avd_readiness.scanner.services import ServiceScanner

logger = logging.getLogger(__name__)


def collect_inventory(
    connector: LocalConnector,
    *,
    metadata_enabled: bool = True,
    log_fn: Callable[[str], None] | None = None,
) -> HostInventory:
    """Run all scanners and build the HostInventory.

    Args:
        connector: Command runner for the local host.
        metadata_enabled: Query the instance metadata service for log context.
        log_fn: Optional callback for progress messages.

    Returns:
        HostInventory; collection failures leave absent values, never raise.
    """
    def _log(msg: str) -> None:
        logger.debug(msg)
        if log_fn:
            log_fn(msg)

    _log("Collecting OS fingerprint...")
    fingerprint = OSScanner(connector).scan()

    _log("Collecting installed services...")
    service_data = ServiceScanner(connector).scan()

    metadata = VMMetadata()
    if metadata_enabled:
        _log("Querying VM metadata...")
        metadata = MetadataScanner().scan()

    return HostInventory(
        fingerprint=fingerprint,
        services=service_data.services,
        services_available=service_data.available,
        metadata=metadata,
    )


def run_readiness(inventory: HostInventory, config: ReadinessConfig) -> ReadinessReport:
    """Evaluate every readiness check against a collected inventory."""
    aggregator = ReadinessAggregator(config)
    return aggregator.run(
        inventory.fingerprint,
        inventory.services,
        services_available=inventory.services_available,
    )
