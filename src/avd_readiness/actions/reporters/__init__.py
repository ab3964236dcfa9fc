"""Console reporters for readiness results."""

from avd_readiness.actions.reporters.base import BaseReporter
from avd_readiness.actions.reporters.json_reporter import JsonReporter
from avd_readiness.actions.reporters.plain_reporter import PlainReporter
from avd_readiness.actions.reporters.rich_reporter import RichReporter

REPORTERS: dict[str, type[BaseReporter]] = {
    "plain": PlainReporter,
    "rich": RichReporter,
    "json": JsonReporter,
}

__all__ = ["BaseReporter", "JsonReporter", "PlainReporter", "REPORTERS", "RichReporter"]
