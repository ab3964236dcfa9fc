"""Inventory dataclasses - Read-only snapshots of the host being assessed."""

from dataclasses import dataclass, field

# Win32_OperatingSystem query failed or returned nothing usable.
SKU_ABSENT = -1

UNKNOWN = "unknown"


@dataclass(frozen=True)
class OsFingerprint:
    """Operating system identification signals collected once per run.

    The signals are redundant on purpose: any one of them may be missing
    when the underlying query fails, so each is kept as reported and
    reconciled later by the edition check.

    Attributes:
        architecture: Processor architecture token (e.g. AMD64, x86, ARM64).
        sku_code: OperatingSystemSKU, or None / SKU_ABSENT when unavailable.
        edition_id: EditionID registry value, empty when unavailable.
        caption: Human readable OS caption, empty when unavailable.
    """

    architecture: str = ""
    sku_code: int | None = None
    edition_id: str = ""
    caption: str = ""

    @property
    def has_sku(self) -> bool:
        """Whether a usable SKU code was collected."""
        return self.sku_code is not None and self.sku_code != SKU_ABSENT

    @property
    def sku_label(self) -> str:
        """SKU code formatted for messages."""
        if self.sku_code is None:
            return str(SKU_ABSENT)
        return str(self.sku_code)


@dataclass(frozen=True)
class ServiceRecord:
    """An installed service as reported by the service manager."""

    name: str
    display_name: str = ""

    @property
    def label(self) -> str:
        """Display name, falling back to the service name."""
        return self.display_name or self.name


@dataclass(frozen=True)
class VMMetadata:
    """Cloud VM identity, used for log context only."""

    name: str = UNKNOWN
    resource_group: str = UNKNOWN
    subscription_id: str = UNKNOWN
    location: str = UNKNOWN

    @property
    def available(self) -> bool:
        return self.name != UNKNOWN


@dataclass
class HostInventory:
    """Everything collected from the host before the checks run."""

    fingerprint: OsFingerprint
    services: list[ServiceRecord] = field(default_factory=list)
    services_available: bool = True
    metadata: VMMetadata = field(default_factory=VMMetadata)
