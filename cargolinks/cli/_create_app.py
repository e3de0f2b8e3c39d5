"""Create the cargo-links Typer CLI app."""

from pathlib import Path

import typer

from cargolinks.api.config.CheckConfig import CheckConfig
from cargolinks.api.config.ConfigError import ConfigError
from cargolinks.api.config.get_package_version import get_package_version
from cargolinks.api.link.cmd_check import cmd_check
from cargolinks.api.ScanError import ScanError
from cargolinks.cli.display.CLIDisplay import CLIDisplay
from cargolinks.logging_config import setup_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cargo-links {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        name="cargo-links",
        help="Check the links in your crate's documentation.",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def check(
        path: Path | None = typer.Argument(None, exists=True, help="Root of the tree to scan [default: .]"),
        concurrency: int | None = typer.Option(
            None, "--concurrency", "-c", min=1, help="Set the number of threads [default: 10]"
        ),
        verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Verbose mode (-v, -vv, -vvv, etc)"),
        no_color: bool = typer.Option(False, "--no-color", help="Don't log in color"),
        timeout: float | None = typer.Option(None, "--timeout", help="Per-request timeout in seconds [default: 10]"),
        config_file: Path | None = typer.Option(
            None, "--config", exists=True, dir_okay=False, help="JSON file with default settings"
        ),
        version: bool = typer.Option(  # noqa: ARG001
            False, "--version", is_eager=True, callback=_version_callback, help="Show version and exit"
        ),
    ) -> None:
        """Check the links in your crate's documentation."""
        overrides = {
            "root": path,
            "concurrency": concurrency,
            "timeout": timeout,
            "verbose": verbose or None,
            "color": False if no_color else None,
        }
        overrides = {key: value for key, value in overrides.items() if value is not None}

        try:
            if config_file is not None:
                config = CheckConfig.load(config_file, **overrides)
            else:
                config = CheckConfig.from_dict(overrides)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

        setup_logging(config.verbose, config.color)
        display = CLIDisplay(verbose=config.verbose, color=config.color)
        display.debug(f"{config!r}")

        try:
            result = cmd_check(config, display)
        except ScanError as e:
            display.error(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

        raise typer.Exit(result.exit_code)

    return app
