"""Metadata Scanner - VM identity from the Azure Instance Metadata Service.

Used only to label the run log. Any failure yields 'unknown' fields.
"""

import logging

import requests

from avd_readiness.model.inventory import UNKNOWN, VMMetadata

logger = logging.getLogger(__name__)

IMDS_URL = "http://169.254.169.254/metadata/instance/compute"
IMDS_API_VERSION = "2021-02-01"


class MetadataScanner:
    """Scanner for cloud VM metadata."""

    def __init__(self, url: str = IMDS_URL, timeout: float = 2.0) -> None:
        self.url = url
        self.timeout = timeout

    def scan(self) -> VMMetadata:
        try:
            response = requests.get(
                self.url,
                headers={"Metadata": "true"},
                params={"api-version": IMDS_API_VERSION, "format": "json"},
                timeout=self.timeout,
                # IMDS must never go through a proxy
                proxies={"http": None, "https": None},
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.info("VM metadata unavailable: %s", e)
            return VMMetadata()

        if not isinstance(data, dict):
            return VMMetadata()

        return VMMetadata(
            name=data.get("name") or UNKNOWN,
            resource_group=data.get("resourceGroupName") or UNKNOWN,
            subscription_id=data.get("subscriptionId") or UNKNOWN,
            location=data.get("location") or UNKNOWN,
        )
