"""Configuration management for avd-readiness.

Supported SKUs, edition identifiers, publisher patterns and the built-in
exception lists live here so new OS releases can be accepted by editing a
YAML file instead of the checks.
"""

import os
import re
import tempfile
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "AVD_READINESS_CONFIG"

DEFAULT_LOG_PATH = Path(tempfile.gettempdir()) / "avd-readiness.log"

# OperatingSystemSKU values
DEFAULT_SUPPORTED_SKUS = frozenset({
    4,    # Enterprise
    7,    # Server Standard
    8,    # Server Datacenter
    27,   # Enterprise N
    175,  # Enterprise multi-session
})

DEFAULT_SUPPORTED_EDITION_IDS = frozenset({
    "Enterprise",
    "EnterpriseN",
    "ServerRdsh",
    "ServerStandard",
    "ServerDatacenter",
})

DEFAULT_PUBLISHERS = ("Citrix*", "Ctx*", "VMware Horizon*", "Omnissa*")

# Services installed by the Citrix Workspace app on session hosts.
CLIENT_APP_SERVICES = frozenset({
    "CtxPkm",
    "CWAUpdaterService",
    "CtxAdpPolicy",
})

VENDOR_CLIENT_PATTERN = r"^(VMware|Omnissa) Horizon Client"


class ConfigError(Exception):
    """Raised when a configuration file or value cannot be used."""


@dataclass(frozen=True)
class ReadinessConfig:
    """Everything the checks need besides the host inventory."""

    supported_skus: frozenset[int] = DEFAULT_SUPPORTED_SKUS
    supported_edition_ids: frozenset[str] = DEFAULT_SUPPORTED_EDITION_IDS
    publishers: tuple[str, ...] = DEFAULT_PUBLISHERS
    ignore_client_app: bool = False
    ignore_vendor_client: bool = False
    client_app_services: frozenset[str] = CLIENT_APP_SERVICES
    vendor_client_pattern: str = VENDOR_CLIENT_PATTERN
    log_path: Path = DEFAULT_LOG_PATH

    @property
    def exclude_by_name(self) -> frozenset[str] | None:
        return self.client_app_services if self.ignore_client_app else None

    @property
    def exclude_prefix_regex(self) -> str | None:
        return self.vendor_client_pattern if self.ignore_vendor_client else None

    def with_overrides(self, **overrides: Any) -> "ReadinessConfig":
        """Return a copy with non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


class ConfigManager:
    """Loads ReadinessConfig from an optional YAML file."""

    def __init__(self, config_file: Path | str | None = None) -> None:
        if config_file is None:
            env_config = os.getenv(CONFIG_ENV_VAR)
            if env_config:
                config_file = env_config
        self.config_file = Path(config_file).expanduser() if config_file else None

    def _load_raw(self) -> dict[str, Any]:
        """Load the YAML mapping, or {} when no file is configured."""
        if self.config_file is None or not self.config_file.exists():
            return {}

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config file {self.config_file}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {self.config_file} must contain a mapping")
        return raw

    def load(self, **overrides: Any) -> ReadinessConfig:
        """Build the effective config: defaults, then file, then overrides."""
        raw = self._load_raw()
        values: dict[str, Any] = {}

        if "supported_skus" in raw:
            values["supported_skus"] = frozenset(_int_list(raw["supported_skus"], "supported_skus"))
        if "supported_edition_ids" in raw:
            values["supported_edition_ids"] = frozenset(
                _str_list(raw["supported_edition_ids"], "supported_edition_ids")
            )
        if "publishers" in raw:
            values["publishers"] = tuple(_str_list(raw["publishers"], "publishers"))
        if "client_app_services" in raw:
            values["client_app_services"] = frozenset(
                _str_list(raw["client_app_services"], "client_app_services")
            )
        if "vendor_client_pattern" in raw:
            values["vendor_client_pattern"] = str(raw["vendor_client_pattern"])
        if "log_path" in raw:
            values["log_path"] = Path(str(raw["log_path"])).expanduser()

        config = ReadinessConfig(**values).with_overrides(**overrides)
        _validate(config)
        return config


def split_patterns(values: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Flatten repeated and comma-separated pattern arguments."""
    patterns: list[str] = []
    for value in values:
        for part in value.split(","):
            part = part.strip()
            if part and part not in patterns:
                patterns.append(part)
    return tuple(patterns)


def _validate(config: ReadinessConfig) -> None:
    try:
        re.compile(config.vendor_client_pattern)
    except re.error as e:
        raise ConfigError(f"Invalid vendor_client_pattern {config.vendor_client_pattern!r}: {e}") from e


def _str_list(value: Any, key: str) -> list[str]:
    if isinstance(value, str):
        return list(split_patterns([value]))
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list of strings")
    return [str(v).strip() for v in value if v is not None and str(v).strip()]


def _int_list(value: Any, key: str) -> list[int]:
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list of integers")
    result = []
    for v in value:
        try:
            result.append(int(v))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"'{key}' contains a non-integer value: {v!r}") from e
    return result
