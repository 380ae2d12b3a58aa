"""Shared CLI plumbing: the per-invocation state and error reporting."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import click

from launchlight.exceptions import format_error_for_display
from launchlight.models import AppConfig, Color
from launchlight.palettes import PaletteTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CLIState:
    """Loaded once by the root command and handed to subcommands."""

    config: AppConfig
    palettes: PaletteTable
    config_path: Path | None = None


pass_state = click.make_pass_decorator(CLIState)


class ColorParamType(click.ParamType):
    """Click parameter that parses ``palette:name:5`` / ``rgb:r,g,b`` text."""

    name = "color"

    def convert(self, value, param, ctx):
        if isinstance(value, Color):
            return value
        try:
            return Color.from_string(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


COLOR = ColorParamType()


def report_error(error: Exception) -> NoReturn:
    """Print an error with its recovery hint and exit with status 1."""
    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    raise click.exceptions.Exit(1)


def format_channels(channels) -> str:
    """Comma-separated channel values, integral floats without '.0'."""
    return ", ".join(
        str(int(c)) if isinstance(c, float) and c.is_integer() else str(c) for c in channels
    )
