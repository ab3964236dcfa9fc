"""Base Reporter Interface."""

from abc import ABC, abstractmethod

from rich.console import Console

from avd_readiness.model.inventory import HostInventory
from avd_readiness.model.result import ReadinessReport


class BaseReporter(ABC):
    """Abstract base class for all console reporters."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @abstractmethod
    def report_results(self, report: ReadinessReport) -> int:
        """Report check results to the console and return the exit code."""
        pass

    @abstractmethod
    def report_host_summary(self, inventory: HostInventory) -> None:
        """Display what was collected from the host."""
        pass
