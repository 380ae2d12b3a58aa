"""Palette commands."""

from typing import Optional

import click

from launchlight.exceptions import LaunchlightError
from launchlight.models import Color

from .common import CLIState, format_channels, pass_state, report_error


@click.group(name="palettes")
def palettes_group():
    """Inspect loaded device palettes."""
    pass


@palettes_group.command(name="list")
@pass_state
def list_palettes(state: CLIState):
    """List loaded palettes and their sizes."""
    if not state.palettes:
        click.echo("No palettes loaded.")
        return

    click.echo("Loaded palettes:\n")
    for name in state.palettes.names():
        marker = "*" if name == state.config.default_palette else " "
        click.echo(f"  {marker} {name} ({len(state.palettes[name])} colors)")


@palettes_group.command(name="show")
@click.argument("name", required=False)
@pass_state
def show_palette(state: CLIState, name: Optional[str]):
    """Show every entry of a palette (default: the configured palette)."""
    name = name or state.config.default_palette

    try:
        colors = state.palettes.require(name)
    except LaunchlightError as e:
        report_error(e)

    click.echo(f"Palette '{name}' ({len(colors)} colors):\n")
    for index, rgb in enumerate(colors):
        color = Color.from_palette(name, index)
        css = color.to_css(state.palettes)
        click.echo(f"  [{index:3d}] {format_channels(rgb):<15} {css}")
