"""Main entry point for the tfhelm CLI.

Command Groups:
    tfhelm values: Chart values merging (render)
    tfhelm manifest: Rendered manifest conversion (json)

Example:
    $ tfhelm --help
    $ tfhelm --log-level DEBUG values render -f values.yaml --set replicaCount=2
"""

from __future__ import annotations

import sys
from importlib.metadata import version as get_version

import click

from tfhelm_core.cli.manifest import manifest
from tfhelm_core.cli.values import values
from tfhelm_core.telemetry.logging import configure_logging


def _get_version() -> str:
    """Get the tfhelm-core package version, or 'unknown' if not installed."""
    try:
        return get_version("tfhelm-core")
    except Exception:
        return "unknown"


@click.group(
    name="tfhelm",
    help="tfhelm - Helm release values merging and redaction.",
    epilog="Use 'tfhelm <command> --help' for command-specific help.",
    context_settings={
        "help_option_names": ["-h", "--help"],
    },
)
@click.version_option(
    version=_get_version(),
    prog_name="tfhelm",
    message="%(prog)s %(version)s",
)
@click.option(
    "--log-level",
    envvar="TFHELM_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Minimum log level written to stderr.",
)
@click.option(
    "--json-logs/--console-logs",
    default=False,
    help="Render logs as JSON lines.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, json_logs: bool) -> None:
    """Root command group for the tfhelm CLI."""
    ctx.ensure_object(dict)
    configure_logging(log_level=log_level, json_output=json_logs)


cli.add_command(values)
cli.add_command(manifest)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the tfhelm CLI.

    Args:
        argv: Command-line arguments (uses sys.argv if None).
    """
    try:
        cli(args=argv, standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
