"""Scanner package - Data collection from the assessed host.

Scanners run inventory queries and collect raw data.
They do NOT decide readiness - that's the checks' job.
"""

from avd_readiness.scanner.metadata import MetadataScanner
from avd_readiness.scanner.os_info import OSScanner
from avd_readiness.scanner.services import ServiceScanner, ServiceScanResult

__all__ = [
    "MetadataScanner",
    "OSScanner",
    "ServiceScanResult",
    "ServiceScanner",
]
