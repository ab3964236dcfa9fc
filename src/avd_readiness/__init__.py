"""avd-readiness: pre-migration readiness checks for virtual desktop images."""

__version__ = "0.3.0"
