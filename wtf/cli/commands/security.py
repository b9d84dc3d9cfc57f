"""Security command implementation."""

import re

import typer

from wtf.security import firewall_state, firewall_stealth_state

app = typer.Typer(help="Show security status")

_COLOR_TAG = re.compile(r"\[(\w+)\]")

# Tag colours with no terminal equivalent
_TERMINAL_COLORS = {"orange": "bright_yellow"}


@app.command()
def firewall():
    """Display firewall and stealth mode status."""
    typer.echo(f"Firewall: {render_label(firewall_state())}")
    typer.echo(f"Stealth:  {render_label(firewall_stealth_state())}")


def render_label(label: str) -> str:
    """Turn "[green]Enabled[white]" style tags into terminal colours.

    Text tagged white is left in the terminal's default colour.
    """
    parts = _COLOR_TAG.split(label)
    rendered = parts[0]

    for color, text in zip(parts[1::2], parts[2::2]):
        if not text:
            continue
        if color == "white":
            rendered += text
        else:
            rendered += typer.style(text, fg=_TERMINAL_COLORS.get(color, color))

    return rendered
