"""Local Connector - Runs inventory commands on the machine being assessed.

This module handles all command execution for scanners. It is read-only:
only query commands are issued, and failures are returned as results
rather than raised so a broken query never aborts a run.
"""

import subprocess
from dataclasses import dataclass, field

POWERSHELL = "powershell.exe"


@dataclass
class CommandResult:
    """Result of a command execution."""

    command: str
    stdout: str
    stderr: str
    exit_code: int
    success: bool = field(init=False)

    def __post_init__(self) -> None:
        self.success = self.exit_code == 0


class LocalConnector:
    """Executes read-only commands on the local host.

    Example:
        >>> connector = LocalConnector()
        >>> result = connector.powershell("(Get-CimInstance Win32_OperatingSystem).Caption")
        >>> print(result.stdout)
    """

    def __init__(self, timeout: float = 60, powershell: str = POWERSHELL) -> None:
        self.timeout = timeout
        self.powershell_exe = powershell

    def run(self, args: list[str], timeout: float | None = None) -> CommandResult:
        """Execute a command without a shell.

        Args:
            args: Program and arguments.
            timeout: Command timeout in seconds. Defaults to connector timeout.

        Returns:
            CommandResult with stdout, stderr, and exit_code.
        """
        command = subprocess.list2cmdline(args)
        cmd_timeout = timeout if timeout is not None else self.timeout

        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                timeout=cmd_timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            # Missing binary, timeout, access denied
            return CommandResult(
                command=command,
                stdout="",
                stderr=f"Execution Error: {e}",
                exit_code=255,
            )

        return CommandResult(
            command=command,
            stdout=completed.stdout.decode("utf-8", errors="replace"),
            stderr=completed.stderr.decode("utf-8", errors="replace"),
            exit_code=completed.returncode,
        )

    def powershell(self, script: str, timeout: float | None = None) -> CommandResult:
        """Run a PowerShell snippet non-interactively."""
        return self.run(
            [self.powershell_exe, "-NoProfile", "-NonInteractive", "-Command", script],
            timeout=timeout,
        )
