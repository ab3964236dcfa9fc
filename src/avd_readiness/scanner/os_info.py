"""OS Scanner - Collects the operating system fingerprint.

Three independent sources are queried:
- Processor architecture from the process environment.
- OperatingSystemSKU and Caption from Win32_OperatingSystem.
- EditionID from the registry.

A failed query degrades only its own field to the absent value.
"""

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from avd_readiness.connector.local import LocalConnector
from avd_readiness.model.inventory import SKU_ABSENT, OsFingerprint

logger = logging.getLogger(__name__)

CURRENT_VERSION_KEY = r"HKLM\SOFTWARE\Microsoft\Windows NT\CurrentVersion"

OS_QUERY = (
    "Get-CimInstance -ClassName Win32_OperatingSystem "
    "| Select-Object OperatingSystemSKU, Caption "
    "| ConvertTo-Json -Compress"
)


@dataclass
class OSMetadata:
    """Raw Win32_OperatingSystem fields."""

    sku_code: int = SKU_ABSENT
    caption: str = ""


class OSScanner:
    """Scanner for operating system identification."""

    def __init__(self, connector: LocalConnector, environ: Mapping[str, str] | None = None) -> None:
        self.connector = connector
        self.environ = environ if environ is not None else os.environ

    def scan(self) -> OsFingerprint:
        """Collect every signal and build the fingerprint."""
        os_meta = self.get_os_metadata()
        return OsFingerprint(
            architecture=self.get_architecture(),
            sku_code=os_meta.sku_code,
            edition_id=self.get_edition_id(),
            caption=os_meta.caption,
        )

    def get_architecture(self) -> str:
        """Get the OS processor architecture.

        A 32-bit process on 64-bit Windows sees x86 in PROCESSOR_ARCHITECTURE;
        the native value is then in PROCESSOR_ARCHITEW6432.
        """
        arch = self.environ.get("PROCESSOR_ARCHITEW6432") or self.environ.get("PROCESSOR_ARCHITECTURE")
        if not arch:
            logger.info("Processor architecture not reported by the environment")
            return ""
        return arch.strip()

    def get_os_metadata(self) -> OSMetadata:
        """Query OperatingSystemSKU and Caption."""
        result = self.connector.powershell(OS_QUERY)
        if not result.success:
            logger.info("OS metadata query failed: %s", result.stderr.strip() or result.exit_code)
            return OSMetadata()

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError:
            logger.info("OS metadata query returned unparseable output")
            return OSMetadata()

        if isinstance(data, list):
            data = data[0] if data else {}
        if not isinstance(data, dict):
            return OSMetadata()

        meta = OSMetadata(caption=str(data.get("Caption") or "").strip())
        sku = data.get("OperatingSystemSKU")
        try:
            meta.sku_code = int(sku)
        except (TypeError, ValueError):
            logger.info("OperatingSystemSKU missing from OS metadata")
        return meta

    def get_edition_id(self) -> str:
        """Read EditionID from the CurrentVersion registry key.

        reg query output looks like:
            HKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Windows NT\\CurrentVersion
                EditionID    REG_SZ    Enterprise
        """
        result = self.connector.run(["reg", "query", CURRENT_VERSION_KEY, "/v", "EditionID"])
        if not result.success:
            logger.info("EditionID registry lookup failed: %s", result.stderr.strip() or result.exit_code)
            return ""

        for line in result.stdout.splitlines():
            parts = line.split(None, 2)
            if len(parts) == 3 and parts[0].lower() == "editionid" and parts[1].startswith("REG_"):
                return parts[2].strip()

        logger.info("EditionID value not present in registry output")
        return ""
