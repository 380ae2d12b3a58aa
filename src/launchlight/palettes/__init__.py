"""Device palette tables."""

from .builtin import BUILTIN_PALETTES, LAUNCHPAD_PALETTE, builtin_table
from .loader import PaletteFile, load_palette_dir, load_palette_file, load_palettes
from .table import PaletteLookup, PaletteTable, RGBTriple, nearest_index

__all__ = [
    "BUILTIN_PALETTES",
    "LAUNCHPAD_PALETTE",
    "PaletteFile",
    "PaletteLookup",
    "PaletteTable",
    "RGBTriple",
    "builtin_table",
    "load_palette_dir",
    "load_palette_file",
    "load_palettes",
    "nearest_index",
]
