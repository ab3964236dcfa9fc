"""Result dataclasses - Check outcomes and the aggregated readiness report."""

from dataclasses import dataclass

EXIT_PASSED = 0
EXIT_FAILED = 1


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single readiness check.

    Attributes:
        name: Stable check identifier (e.g. 'os-architecture').
        passed: Whether the host satisfies this check.
        detail_message: Human readable explanation, always populated.
    """

    name: str
    passed: bool
    detail_message: str

    @property
    def status_label(self) -> str:
        return "PASS" if self.passed else "FAIL"

    def __str__(self) -> str:
        return f"[{self.status_label}] {self.name}: {self.detail_message}"


@dataclass(frozen=True)
class ReadinessReport:
    """Aggregated outcome of one readiness run.

    The verdict is derived from the individual results and cannot be set
    on its own.
    """

    results: tuple[CheckResult, ...] = ()

    @property
    def overall_passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def failures(self) -> list[CheckResult]:
        return [result for result in self.results if not result.passed]

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def exit_code(self) -> int:
        return EXIT_PASSED if self.overall_passed else EXIT_FAILED

    def summary_line(self) -> str:
        """Single terminal status line for orchestrators watching stdout."""
        if self.overall_passed:
            return f"READINESS PASSED: {len(self.results)} checks passed"
        messages = "; ".join(f"{r.name}: {r.detail_message}" for r in self.failures)
        return f"READINESS FAILED: {self.failure_count} failing check(s): {messages}"

    def to_dict(self) -> dict:
        return {
            "overall_passed": self.overall_passed,
            "failure_count": self.failure_count,
            "results": [
                {"name": r.name, "passed": r.passed, "detail_message": r.detail_message}
                for r in self.results
            ],
        }
