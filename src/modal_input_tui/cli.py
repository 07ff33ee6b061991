"""Modal Input TUI CLI entry point.

Usage:
    modal-input                              # Launch with configured settings
    modal-input run --config my.yaml         # Launch with an explicit settings file
    modal-input run --log-file tui.log --debug
    modal-input config                       # Show effective settings
"""

from __future__ import annotations

import logging

import click

from . import __version__
from .config import ConfigError, Settings, default_settings_path, load_settings

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__)
def main(ctx: click.Context) -> None:
    """Modal Input - vim-style single-line text entry in the terminal.

    Run without arguments to start with the configured settings.
    """
    if ctx.invoked_subcommand is None:
        _run_app(None)


# =============================================================================
# Run Command
# =============================================================================


@main.command("run")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file (default: ~/.modal-input/settings.yaml)",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write logs to this file",
)
@click.option("--debug", is_flag=True, help="Log at DEBUG level")
def run_command(config_path: str | None, log_file: str | None, debug: bool) -> None:
    """Run the Modal Input TUI.

    Examples:

        # Use configured settings
        modal-input run

        # Log key handling to a file
        modal-input run --log-file /tmp/modal-input.log --debug
    """
    _setup_logging(log_file, debug)
    _run_app(config_path)


# =============================================================================
# Config Command
# =============================================================================


@main.command("config")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file to read",
)
def config_command(config_path: str | None) -> None:
    """Show the effective configuration."""
    import yaml

    settings = _load_settings(config_path)
    source = config_path or default_settings_path()

    click.echo(f"Configuration file: {source}\n")
    click.echo(yaml.dump(settings.to_dict(), default_flow_style=False, sort_keys=False))


# =============================================================================
# Helper Functions
# =============================================================================


def _setup_logging(log_file: str | None, debug: bool) -> None:
    """Send logs to a file; the terminal belongs to the TUI."""
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_settings(config_path: str | None) -> Settings:
    try:
        return load_settings(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def _run_app(config_path: str | None) -> None:
    """Run the TUI, reporting terminal failures without a traceback."""
    from .app import run

    settings = _load_settings(config_path)
    try:
        run(settings)
    except Exception as e:
        logger.error(f"Terminal session failed: {e}")
        click.echo(f"Error: {e}")


if __name__ == "__main__":
    main()
