"""Main CLI entry point for wtf."""

import typer
from typing_extensions import Annotated

from wtf import __version__
from wtf._log import setup_logging
from wtf.cli import commands
from wtf.cli.context import CliState
from wtf.config import (
    BootstrapReport,
    ConfigLayout,
    MigrationError,
    PathResolutionError,
    ProvisioningError,
    initialize,
)

app = typer.Typer(
    name="wtf",
    help="Personal information dashboard for your terminal",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(commands.config.app, name="config")
app.add_typer(commands.security.app, name="security")

# Commands that don't need configuration on disk
_NO_BOOTSTRAP = {"version"}


@app.callback()
def callback(
    ctx: typer.Context,
    config: Annotated[
        str | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a custom config file. Skips creating the default files.",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
):
    """Prepare the configuration directory before running a command."""
    setup_logging(verbose)

    layout = ConfigLayout()
    state = CliState(
        layout=layout,
        config_file=config or f"{layout.config_dir}{layout.config_file}",
        has_custom=config is not None,
    )

    if ctx.invoked_subcommand not in _NO_BOOTSTRAP:
        state.report = bootstrap(state.has_custom, layout)

    ctx.obj = state


def bootstrap(has_custom: bool, layout: ConfigLayout) -> BootstrapReport:
    """Run initialize, exiting with status 1 and a diagnostic on failure.

    Nothing else in wtf can run without its configuration directory, so
    there is no way to continue from here.
    """
    try:
        return initialize(has_custom=has_custom, layout=layout)
    except MigrationError as e:
        typer.echo("ERROR: Could not migrate your configuration.", err=True)
        typer.echo(f"  from:  {e.source}", err=True)
        typer.echo(f"  to:    {e.destination}", err=True)
        typer.echo(f"  cause: {e.cause}", err=True)
        typer.echo(err=True)
        typer.echo(f"Nothing was changed in {e.source}.", err=True)
        raise typer.Exit(1)
    except ProvisioningError as e:
        typer.echo(f"ERROR: Could not create {e.path}", err=True)
        typer.echo(f"  cause: {e.cause}", err=True)
        raise typer.Exit(1)
    except PathResolutionError as e:
        typer.echo(f"ERROR: Could not resolve the configuration path: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def version():
    """Show version information."""
    typer.echo(f"wtf version {__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
