"""Tests for the OS fingerprint scanner."""

import logging

from avd_readiness.connector.local import CommandResult
from avd_readiness.model.inventory import SKU_ABSENT
from avd_readiness.scanner.os_info import OSScanner

REG_OUTPUT = """
HKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Windows NT\\CurrentVersion
    EditionID    REG_SZ    ServerStandard

"""


def _ok(stdout: str) -> CommandResult:
    return CommandResult(command="cmd", stdout=stdout, stderr="", exit_code=0)


def _fail() -> CommandResult:
    return CommandResult(command="cmd", stdout="", stderr="Access is denied.", exit_code=1)


def test_full_fingerprint(mock_connector):
    mock_connector.powershell.return_value = _ok(
        '{"OperatingSystemSKU":7,"Caption":"Microsoft Windows Server 2022 Standard"}'
    )
    mock_connector.run.return_value = _ok(REG_OUTPUT)
    scanner = OSScanner(mock_connector, environ={"PROCESSOR_ARCHITECTURE": "AMD64"})

    fp = scanner.scan()

    assert fp.architecture == "AMD64"
    assert fp.sku_code == 7
    assert fp.edition_id == "ServerStandard"
    assert fp.caption == "Microsoft Windows Server 2022 Standard"


def test_wow64_architecture_preferred(mock_connector):
    scanner = OSScanner(
        mock_connector,
        environ={"PROCESSOR_ARCHITECTURE": "x86", "PROCESSOR_ARCHITEW6432": "AMD64"},
    )
    assert scanner.get_architecture() == "AMD64"


def test_missing_architecture(mock_connector):
    assert OSScanner(mock_connector, environ={}).get_architecture() == ""


def test_os_query_failure_degrades_sku_only(mock_connector, caplog):
    mock_connector.powershell.return_value = _fail()
    mock_connector.run.return_value = _ok(REG_OUTPUT)
    with caplog.at_level(logging.INFO, logger="avd_readiness.scanner.os_info"):
        fp = OSScanner(mock_connector, environ={"PROCESSOR_ARCHITECTURE": "AMD64"}).scan()

    assert "OS metadata query failed: Access is denied." in caplog.text

    assert fp.sku_code == SKU_ABSENT
    assert not fp.has_sku
    assert fp.caption == ""
    assert fp.edition_id == "ServerStandard"


def test_registry_failure_degrades_edition_only(mock_connector, caplog):
    mock_connector.powershell.return_value = _ok('{"OperatingSystemSKU":4,"Caption":"Windows 10 Enterprise"}')
    mock_connector.run.return_value = _fail()
    with caplog.at_level(logging.INFO, logger="avd_readiness.scanner.os_info"):
        fp = OSScanner(mock_connector, environ={"PROCESSOR_ARCHITECTURE": "AMD64"}).scan()

    assert "EditionID registry lookup failed" in caplog.text

    assert fp.edition_id == ""
    assert fp.sku_code == 4


def test_unparseable_os_output(mock_connector):
    mock_connector.powershell.return_value = _ok("not json")
    meta = OSScanner(mock_connector, environ={}).get_os_metadata()
    assert meta.sku_code == SKU_ABSENT


def test_null_sku_keeps_caption(mock_connector):
    mock_connector.powershell.return_value = _ok('{"OperatingSystemSKU":null,"Caption":"Windows"}')
    meta = OSScanner(mock_connector, environ={}).get_os_metadata()
    assert meta.sku_code == SKU_ABSENT
    assert meta.caption == "Windows"


def test_edition_value_missing_from_output(mock_connector):
    mock_connector.run.return_value = _ok("HKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Windows NT\\CurrentVersion\n")
    assert OSScanner(mock_connector, environ={}).get_edition_id() == ""
