"""Model package - Core data structures for avd-readiness."""

from avd_readiness.model.inventory import (
    SKU_ABSENT,
    HostInventory,
    OsFingerprint,
    ServiceRecord,
    VMMetadata,
)
from avd_readiness.model.result import CheckResult, ReadinessReport

__all__ = [
    "CheckResult",
    "HostInventory",
    "OsFingerprint",
    "ReadinessReport",
    "SKU_ABSENT",
    "ServiceRecord",
    "VMMetadata",
]
