"""Actions package - Output actions.

Every action is read-only on the assessed host and documents its
contract in its module docstring.
"""

from avd_readiness.actions.report import ReportAction

__all__ = ["ReportAction"]
