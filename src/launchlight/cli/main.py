"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from .commands import color_group, config_group, devices, palettes_group

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Logs go to stderr unless a log file is requested (or debug mode picks
    ./launchlight-debug.log), in which case a rotating file handler is used.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_file = Path.cwd() / "launchlight-debug.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file:
        # Keeps last 5 files, max 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.set_name("launchlight")
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    # Replace the handler from a previous call (repeated invocations in one process)
    for existing in list(root_logger.handlers):
        if existing.get_name() == "launchlight":
            root_logger.removeHandler(existing)
            existing.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.pass_context
@click.version_option(version="0.1.0", prog_name="launchlight")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.launchlight/config.json)'
)
@click.option(
    '--palettes-dir',
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help='Directory of palette files (overrides the config)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./launchlight-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    palettes_dir: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Launchlight - pad colors for Launchpad-family light shows.

    Resolve, convert and composite pad colors against device palettes.

    \b
    Colors are written as:
      unset
      palette:<name>:<index>     e.g. palette:launchpad:5
      rgb:<r>,<g>,<b>            e.g. rgb:255,128,0
      rgba:<r>,<g>,<b>,<a>

    \b
    Examples:
      launchlight palettes list
      launchlight palettes show launchpad
      launchlight color show palette:launchpad:21
      launchlight color rgba rgb:128,0,0
      launchlight color overlay rgb:60,60,60 palette:launchpad:45
      launchlight devices
      launchlight config set --default-palette launchpad
    """
    from launchlight.exceptions import LaunchlightError
    from launchlight.models import AppConfig
    from launchlight.palettes import load_palettes

    from .commands.common import CLIState, report_error

    setup_logging(verbose, debug, log_file, log_level)

    try:
        config = AppConfig.load_or_default(config_path)
        table = load_palettes(palettes_dir or config.palettes_dir)
    except LaunchlightError as e:
        logger.exception("Error loading configuration")
        report_error(e)

    ctx.obj = CLIState(config=config, palettes=table, config_path=config_path)


cli.add_command(palettes_group)
cli.add_command(color_group)
cli.add_command(devices)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
