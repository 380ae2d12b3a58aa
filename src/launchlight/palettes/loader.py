"""Loading palette tables from the built-ins and user palette files.

A palette file is JSON or YAML with a name and a list of RGB entries::

    name: mystrix
    colors:
      - [0, 0, 0]
      - [255, 0, 0]

``name`` may be omitted, in which case the file stem is used. Files are
validated with Pydantic; a broken file is reported and skipped so one bad
palette does not prevent the rest from loading.
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import yaml
from pydantic import BaseModel, Field, ValidationError

from launchlight.exceptions import PaletteFileError, collect_errors

from .builtin import builtin_table
from .table import PaletteTable, RGBTriple

logger = logging.getLogger(__name__)

PALETTE_SUFFIXES = (".json", ".yaml", ".yml")

Channel = Annotated[int, Field(ge=0, le=255)]


class PaletteFile(BaseModel):
    """On-disk palette definition."""

    name: str | None = Field(default=None, description="Palette name (defaults to file stem)")
    colors: list[tuple[Channel, Channel, Channel]] = Field(
        min_length=1, description="RGB entries in palette index order"
    )


def load_palette_file(path: Path) -> tuple[str, tuple[RGBTriple, ...]]:
    """
    Load a single palette file.

    Args:
        path: JSON or YAML palette file

    Returns:
        (palette name, RGB entries)

    Raises:
        PaletteFileError: If the file cannot be read, parsed or validated
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PaletteFileError(str(path), f"cannot read file: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            raw = json.loads(text)
        else:
            raw = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise PaletteFileError(str(path), f"invalid syntax: {e}") from e

    try:
        palette = PaletteFile.model_validate(raw)
    except ValidationError as e:
        raise PaletteFileError(str(path), str(e)) from e

    name = palette.name or path.stem
    logger.debug(f"Loaded palette '{name}' ({len(palette.colors)} colors) from {path}")
    return name, tuple(palette.colors)


def load_palette_dir(directory: Path) -> dict[str, tuple[RGBTriple, ...]]:
    """
    Load every palette file in a directory.

    Files are read in name order, so when two files declare the same palette
    name the later one wins. Invalid files are logged and skipped.

    Args:
        directory: Directory to scan (non-recursive). Missing is treated as empty.

    Returns:
        Mapping of palette name to RGB entries
    """
    if not directory.is_dir():
        logger.debug(f"Palette directory {directory} does not exist, skipping")
        return {}

    palettes: dict[str, tuple[RGBTriple, ...]] = {}
    collector = collect_errors("load palette files")

    for path in sorted(directory.iterdir()):
        if path.suffix.lower() not in PALETTE_SUFFIXES or not path.is_file():
            continue
        with collector.try_operation(f"load {path.name}"):
            name, colors = load_palette_file(path)
            palettes[name] = colors

    if collector.has_errors:
        logger.warning(collector.get_summary())

    return palettes


def load_palettes(palettes_dir: Path | None = None) -> PaletteTable:
    """
    Build the process-wide palette table.

    Starts from the built-in palettes and layers user palette files from
    ``palettes_dir`` on top.

    Args:
        palettes_dir: Directory of user palette files (optional)

    Returns:
        The immutable palette table
    """
    table = builtin_table()
    if palettes_dir is not None:
        table = table.merged(load_palette_dir(palettes_dir))

    logger.info(f"Loaded {len(table)} palettes: {', '.join(table.names())}")
    return table
