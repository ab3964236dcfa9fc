"""Click-based CLI for avd-readiness.

IMPORTANT: This module only ORCHESTRATES. It never decides readiness.
- Loads configuration
- Collects inventory
- Invokes the aggregator
- Publishes output and exit code
"""

import sys
from pathlib import Path

import click
from rich.console import Console

from avd_readiness import __version__
from avd_readiness.actions.logfile import run_log
from avd_readiness.actions.report import ReportAction
from avd_readiness.config import DEFAULT_PUBLISHERS, ConfigError, ConfigManager, split_patterns
from avd_readiness.connector.local import LocalConnector
from avd_readiness.model.result import EXIT_FAILED
from avd_readiness.pipeline import collect_inventory, run_readiness

console = Console()


@click.command()
@click.version_option(version=__version__, prog_name="avd-readiness")
@click.option(
    "--publishers", "-p", multiple=True,
    help=f"Publisher glob(s), repeatable or comma-separated (default: {', '.join(DEFAULT_PUBLISHERS)})",
)
@click.option("--ignore-client-app", is_flag=True, help="Ignore known client app services")
@click.option("--ignore-vendor-client", is_flag=True, help="Ignore the vendor's desktop client product")
@click.option("--log-path", type=click.Path(dir_okay=False, path_type=Path), help="Run log file (truncated per run)")
@click.option("--config", "-c", "config_file", type=click.Path(dir_okay=False), help="YAML configuration file")
@click.option("--format", "fmt", type=click.Choice(["rich", "plain", "json"]), default=None, help="Console output format")
@click.option("--quiet", "-q", is_flag=True, help="Only print the summary line")
@click.option("--no-metadata", is_flag=True, help="Skip the VM metadata lookup")
def main(
    publishers: tuple[str, ...],
    ignore_client_app: bool,
    ignore_vendor_client: bool,
    log_path: Path | None,
    config_file: str | None,
    fmt: str | None,
    quiet: bool,
    no_metadata: bool,
) -> None:
    """avd-readiness: pre-migration checks for virtual desktop images.

    Verifies OS architecture, OS edition, and conflicting third-party
    services. Exits 0 when the image is ready, 1 otherwise.
    """
    try:
        config = ConfigManager(config_file).load(
            publishers=split_patterns(publishers) or None,
            ignore_client_app=ignore_client_app,
            ignore_vendor_client=ignore_vendor_client,
            log_path=log_path,
        )
    except ConfigError as e:
        console.print(f"[bold red]Error:[/] {e}")
        sys.exit(EXIT_FAILED)

    # Auto-detect format if not specified
    if fmt is None:
        fmt = "plain" if not sys.stdout.isatty() else "rich"

    try:
        with run_log(config.log_path) as logger:
            reporter = ReportAction(console, format_mode=fmt, quiet=quiet, logger=logger)
            reporter.log_start()
            inventory = collect_inventory(LocalConnector(), metadata_enabled=not no_metadata)
            report = run_readiness(inventory, config)
            exit_code = reporter.publish(inventory, report)
    except OSError as e:
        console.print(f"[bold red]Error:[/] cannot write log {config.log_path}: {e}")
        click.echo("READINESS FAILED: checks could not be completed")
        sys.exit(EXIT_FAILED)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
