"""Config command implementation.

Shows where wtf keeps its configuration and what it contains.
"""

import typer
import yaml
from typing_extensions import Annotated

from wtf.cli.context import CliState
from wtf.config import ConfigLoadError, load_config_file, load_secrets_file

app = typer.Typer(help="Inspect configuration")

REDACTED = "***REDACTED***"


@app.command()
def path(ctx: typer.Context):
    """Display the configuration directory and file locations."""
    state: CliState = ctx.obj
    layout = state.layout

    typer.echo(f"Config directory: {layout.resolve_config_dir()}")
    typer.echo(f"Config file:      {layout.expand(state.config_file)}")
    typer.echo(f"Secrets file:     {layout.expand(state.secrets_file)}")


@app.command()
def show(
    ctx: typer.Context,
    secrets: Annotated[
        bool, typer.Option("--secrets", help="Show the secrets file instead")
    ] = False,
):
    """Display current configuration.

    Values in the secrets file are redacted in output.
    """
    state: CliState = ctx.obj

    try:
        if secrets:
            data = _redact(load_secrets_file(state.secrets_file, state.layout))
        else:
            data = load_config_file(state.config_file, state.layout)
    except ConfigLoadError as e:
        typer.echo(f"Could not load {e.path}", err=True)
        typer.echo(f"  cause: {e.cause}", err=True)
        raise typer.Exit(1)

    if not data:
        typer.echo("No configuration found.")
        return

    typer.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), nl=False)


def _redact(value):
    """Replace every leaf value with a marker, keeping the key structure."""
    if isinstance(value, dict):
        return {key: _redact(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_redact(item) for item in value]
    # Redact secret but indicate whether it's set
    return REDACTED if value not in (None, "") else "(not set)"
