"""Device catalog command."""

import click

from launchlight.devices import DEVICES

from .common import CLIState, pass_state


@click.command(name="devices")
@pass_state
def devices(state: CLIState):
    """List supported devices and the palette each one uses."""
    click.echo("Supported devices:\n")
    for device in DEVICES:
        marker = "*" if device.model == state.config.default_device else " "
        loaded = "" if device.palette in state.palettes else " (palette not loaded)"
        click.echo(f"  {marker} {device.model}")
        click.echo(f"      Palette: {device.palette}{loaded}")
        click.echo(f"      Grid: {device.grid_size}x{device.grid_size}")
