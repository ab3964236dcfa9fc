"""Tests for CLI flags.

Verifies:
1. Exit codes follow the overall verdict.
2. --ignore-client-app, --ignore-vendor-client and --publishers reach the checks.
3. --log-path receives a timestamped log.
4. Invalid configuration exits 1 with an error.
5. Collection failures are recorded in the run log.
"""

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from avd_readiness import __version__
from avd_readiness.cli import main
from avd_readiness.connector.local import CommandResult
from avd_readiness.model.inventory import HostInventory, OsFingerprint, ServiceRecord


def _inventory(arch="AMD64", edition="ServerStandard", sku=None, services=None):
    return HostInventory(
        fingerprint=OsFingerprint(architecture=arch, sku_code=sku, edition_id=edition),
        services=services or [],
    )


def _invoke(args, inventory):
    runner = CliRunner()
    with patch("avd_readiness.cli.collect_inventory", return_value=inventory) as mock_collect, \
         patch("avd_readiness.cli.LocalConnector"):
        result = runner.invoke(main, args, catch_exceptions=False)
    return result, mock_collect


def test_ready_image_exits_zero(tmp_path: Path):
    result, _ = _invoke(
        ["--log-path", str(tmp_path / "run.log"), "--no-metadata"],
        _inventory(edition="Enterprise", sku=4),
    )
    assert result.exit_code == 0
    assert result.output.strip().splitlines()[-1] == "READINESS PASSED: 3 checks passed"


def test_unsupported_image_exits_one(tmp_path: Path):
    result, _ = _invoke(
        ["--log-path", str(tmp_path / "run.log")],
        _inventory(arch="x86", edition="", sku=-1),
    )
    assert result.exit_code == 1
    last = result.output.strip().splitlines()[-1]
    assert last.startswith("READINESS FAILED: 2 failing check(s)")


def test_ignore_client_app_flag(tmp_path: Path):
    inventory = _inventory(services=[ServiceRecord(name="CtxPkm", display_name="Citrix PKM")])
    log_path = str(tmp_path / "run.log")

    without_flag, _ = _invoke(["--log-path", log_path], inventory)
    with_flag, _ = _invoke(["--log-path", log_path, "--ignore-client-app"], inventory)

    assert without_flag.exit_code == 1
    assert "Citrix PKM" in without_flag.output
    assert with_flag.exit_code == 0


def test_publishers_override(tmp_path: Path):
    inventory = _inventory(services=[ServiceRecord(name="prl_tools", display_name="Parallels Tools")])
    log_path = str(tmp_path / "run.log")

    default_run, _ = _invoke(["--log-path", log_path], inventory)
    custom_run, _ = _invoke(["--log-path", log_path, "--publishers", "Citrix*,Parallels*"], inventory)

    assert default_run.exit_code == 0
    assert custom_run.exit_code == 1


def test_no_metadata_flag_passed_through(tmp_path: Path):
    _, mock_collect = _invoke(["--log-path", str(tmp_path / "run.log"), "--no-metadata"], _inventory())
    _, kwargs = mock_collect.call_args
    assert kwargs["metadata_enabled"] is False


def test_log_file_written(tmp_path: Path):
    log_file = tmp_path / "nested" / "run.log"
    result, _ = _invoke(["--log-path", str(log_file), "--quiet"], _inventory())

    assert result.exit_code == 0
    content = log_file.read_text(encoding="utf-8")
    assert "READINESS PASSED" in content
    assert len(result.output.strip().splitlines()) == 1


def test_invalid_config_exits_one(tmp_path: Path):
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("supported_skus: nope\n", encoding="utf-8")

    result, mock_collect = _invoke(
        ["--config", str(config_file), "--log-path", str(tmp_path / "run.log")],
        _inventory(),
    )

    assert result.exit_code == 1
    assert "Error" in result.output
    mock_collect.assert_not_called()


def test_ignore_vendor_client_flag(tmp_path: Path):
    inventory = _inventory(services=[ServiceRecord(name="hznclient", display_name="VMware Horizon Client")])
    log_path = str(tmp_path / "run.log")

    without_flag, _ = _invoke(["--log-path", log_path], inventory)
    with_flag, _ = _invoke(["--log-path", log_path, "--ignore-vendor-client"], inventory)

    assert without_flag.exit_code == 1
    assert "VMware Horizon Client" in without_flag.output
    assert with_flag.exit_code == 0


def test_failed_service_query_recorded_in_log(tmp_path: Path):
    log_file = tmp_path / "run.log"
    failed = CommandResult(command="powershell.exe", stdout="", stderr="Access is denied.", exit_code=1)
    runner = CliRunner()
    with patch("avd_readiness.cli.LocalConnector") as mock_cls:
        mock_cls.return_value.powershell.return_value = failed
        mock_cls.return_value.run.return_value = failed
        result = runner.invoke(
            main, ["--log-path", str(log_file), "--no-metadata", "--quiet"], catch_exceptions=False
        )

    assert result.exit_code == 1
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith(f"avd-readiness {__version__}")
    assert any("[WARNING] Service list query failed: Access is denied." in line for line in lines)
    assert any("[INFO] OS metadata query failed" in line for line in lines)
