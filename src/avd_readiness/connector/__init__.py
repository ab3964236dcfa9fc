"""Connector package - Command execution on the assessed host."""

from avd_readiness.connector.local import CommandResult, LocalConnector

__all__ = ["CommandResult", "LocalConnector"]
