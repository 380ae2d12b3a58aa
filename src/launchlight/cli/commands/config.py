"""Configuration commands.

Commands:
    - config show                      # Display configuration
    - config set --option VALUE ...    # Update and save configuration
"""

from pathlib import Path
from typing import Optional

import click

from launchlight.devices import get_device
from launchlight.exceptions import LaunchlightError, UnknownPaletteError

from .common import CLIState, pass_state, report_error


@click.group(name="config")
def config_group():
    """Show or change the launchlight configuration."""
    pass


@config_group.command(name="show")
@pass_state
def show_config(state: CLIState):
    """Display the current configuration as JSON."""
    click.echo(state.config.model_dump_json(indent=2))


@config_group.command(name="set")
@click.option("--default-palette", type=str, default=None, help="Palette used by default")
@click.option("--default-device", type=str, default=None, help="Device shown by default")
@click.option(
    "--palettes-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory of palette files",
)
@pass_state
def set_config(
    state: CLIState,
    default_palette: Optional[str],
    default_device: Optional[str],
    palettes_dir: Optional[Path],
):
    """Update configuration values and save them."""
    updates: dict = {}

    try:
        if default_palette is not None:
            if default_palette not in state.palettes:
                raise UnknownPaletteError(default_palette, state.palettes.names())
            updates["default_palette"] = default_palette
        if default_device is not None:
            updates["default_device"] = get_device(default_device).model
        if palettes_dir is not None:
            updates["palettes_dir"] = palettes_dir

        if not updates:
            click.echo("Nothing to update.")
            return

        config = state.config.model_copy(update=updates)
        config.save(state.config_path)
    except LaunchlightError as e:
        report_error(e)

    for field, value in updates.items():
        click.echo(f"Set {field} = {value}")
