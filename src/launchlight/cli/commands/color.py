"""Color commands."""

from typing import Optional

import click

from launchlight.exceptions import UnknownPaletteError
from launchlight.models import Color

from .common import COLOR, CLIState, format_channels, pass_state, report_error


@click.group(name="color")
def color_group():
    """Resolve, convert and composite colors."""
    pass


@color_group.command(name="show")
@click.argument("color", type=COLOR)
@pass_state
def show_color(state: CLIState, color: Color):
    """Show how a color resolves."""
    palettes = state.palettes

    click.echo(f"Type:   {color.type}")
    if color.value:
        click.echo(f"Value:  {format_channels(color.value)}")
    click.echo(f"RGB:    {format_channels(color.rgb(palettes))}")
    click.echo(f"CSS:    {color.to_css(palettes)}")
    click.echo(f"7-bit:  {format_channels(color.to_7bit(palettes))}")
    click.echo(f"Black:  {'yes' if color.is_black(palettes) else 'no'}")


@color_group.command(name="rgba")
@click.argument("color", type=COLOR)
@pass_state
def rgba_color(state: CLIState, color: Color):
    """Convert to full brightness with brightness carried as alpha (0-255)."""
    rgba = color.to_rgba(state.palettes)
    click.echo(f"RGBA:   {format_channels(rgba.value)}")
    click.echo(f"CSS:    {rgba.to_css()}")


@color_group.command(name="overlay")
@click.argument("top", type=COLOR)
@click.argument("base", type=COLOR)
@pass_state
def overlay_color(state: CLIState, top: Color, base: Color):
    """Composite TOP over BASE (TOP's channels act as per-channel opacity)."""
    result = top.overlay(base, state.palettes)
    click.echo(f"RGB:    {format_channels(result.value)}")
    click.echo(f"CSS:    {result.to_css()}")


@color_group.command(name="nearest")
@click.argument("color", type=COLOR)
@click.option(
    "--palette",
    "-p",
    type=str,
    default=None,
    help="Palette to match against (default: the configured palette)",
)
@pass_state
def nearest_color(state: CLIState, color: Color, palette: Optional[str]):
    """Find the closest entry of a palette."""
    palette = palette or state.config.default_palette
    if palette not in state.palettes:
        report_error(UnknownPaletteError(palette, state.palettes.names()))

    encoded = color.to_palette(palette, state.palettes)
    click.echo(f"Index:  {encoded.palette_index}")
    click.echo(f"RGB:    {format_channels(encoded.rgb(state.palettes))}")
    click.echo(f"CSS:    {encoded.to_css(state.palettes)}")
