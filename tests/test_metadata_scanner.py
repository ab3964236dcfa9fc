"""Tests for the VM metadata scanner."""

from unittest.mock import MagicMock, patch

import requests

from avd_readiness.model.inventory import UNKNOWN
from avd_readiness.scanner.metadata import MetadataScanner


def test_reads_compute_metadata():
    response = MagicMock()
    response.json.return_value = {
        "name": "golden-image-01",
        "resourceGroupName": "rg-avd",
        "subscriptionId": "0000-1111",
        "location": "westeurope",
    }
    with patch("avd_readiness.scanner.metadata.requests.get", return_value=response) as mock_get:
        meta = MetadataScanner().scan()

    assert meta.name == "golden-image-01"
    assert meta.resource_group == "rg-avd"
    assert meta.available
    _, kwargs = mock_get.call_args
    assert kwargs["headers"] == {"Metadata": "true"}


def test_connection_error_yields_unknown():
    with patch(
        "avd_readiness.scanner.metadata.requests.get",
        side_effect=requests.ConnectionError("no route"),
    ):
        meta = MetadataScanner().scan()

    assert meta.name == UNKNOWN
    assert not meta.available


def test_http_error_yields_unknown():
    response = MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError("400")
    with patch("avd_readiness.scanner.metadata.requests.get", return_value=response):
        assert MetadataScanner().scan().resource_group == UNKNOWN


def test_missing_fields_default_to_unknown():
    response = MagicMock()
    response.json.return_value = {"name": "vm1"}
    with patch("avd_readiness.scanner.metadata.requests.get", return_value=response):
        meta = MetadataScanner().scan()
    assert meta.name == "vm1"
    assert meta.location == UNKNOWN
