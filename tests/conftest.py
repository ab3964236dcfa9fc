"""Pytest configuration and fixtures for avd-readiness tests."""

import pytest
from unittest.mock import MagicMock

from avd_readiness.config import ReadinessConfig
from avd_readiness.connector.local import CommandResult, LocalConnector
from avd_readiness.model.inventory import OsFingerprint, ServiceRecord


@pytest.fixture
def mock_connector():
    """Create a mock local connector; commands succeed with no output."""
    connector = MagicMock(spec=LocalConnector)
    ok = CommandResult(command="test", stdout="", stderr="", exit_code=0)
    connector.run.return_value = ok
    connector.powershell.return_value = ok
    return connector


@pytest.fixture
def default_config():
    return ReadinessConfig()


@pytest.fixture
def supported_fingerprint():
    return OsFingerprint(
        architecture="AMD64",
        sku_code=4,
        edition_id="Enterprise",
        caption="Microsoft Windows 11 Enterprise",
    )


@pytest.fixture
def unsupported_fingerprint():
    return OsFingerprint(architecture="x86", sku_code=-1, edition_id="", caption="")


@pytest.fixture
def citrix_services():
    """A typical Citrix VDA host plus unrelated services."""
    return [
        ServiceRecord(name="BrokerAgent", display_name="Citrix Desktop Service"),
        ServiceRecord(name="CtxPkm", display_name="Citrix PKM"),
        ServiceRecord(name="Spooler", display_name="Print Spooler"),
        ServiceRecord(name="wuauserv", display_name="Windows Update"),
    ]
