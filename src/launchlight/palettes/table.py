"""Palette tables: named, fixed-size lists of firmware RGB colors.

A PaletteTable is built once at startup (from the built-in palettes and any
user palette files) and is read-only afterwards, so it can be shared freely
between threads and passed to every color operation that needs it.

Performance:
- Forward lookup (name, index -> RGB): dictionary access plus tuple index
- Reverse lookup (RGB -> nearest index): Euclidean distance with LRU cache
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from functools import lru_cache
from types import MappingProxyType

from launchlight.exceptions import PaletteDataError, UnknownPaletteError

logger = logging.getLogger(__name__)

RGBTriple = tuple[int, int, int]

# Anything that maps a palette name to indexable RGB triples. PaletteTable is
# the usual implementation, but a plain dict of lists works too.
PaletteLookup = Mapping[str, Sequence[Sequence[float]]]


def _validate_palette(name: str, colors: Iterable[Sequence[int]]) -> tuple[RGBTriple, ...]:
    """Check every entry is three integers in 0-255 and freeze the palette."""
    validated = []
    for index, entry in enumerate(colors):
        channels = tuple(entry)
        if len(channels) != 3:
            raise PaletteDataError(name, f"entry {index} has {len(channels)} channels, expected 3")
        for channel in channels:
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise PaletteDataError(name, f"entry {index} has non-integer channel {channel!r}")
            if not 0 <= channel <= 255:
                raise PaletteDataError(name, f"entry {index} has channel {channel} outside 0-255")
        validated.append(channels)
    return tuple(validated)


@lru_cache(maxsize=1024)
def _nearest_index(colors: tuple[RGBTriple, ...], rgb: tuple[float, float, float]) -> int:
    min_distance = float("inf")
    closest_index = 0

    for index, (r, g, b) in enumerate(colors):
        distance = ((rgb[0] - r) ** 2 + (rgb[1] - g) ** 2 + (rgb[2] - b) ** 2) ** 0.5
        if distance < min_distance:
            min_distance = distance
            closest_index = index

    return closest_index


def nearest_index(colors: Sequence[Sequence[int]], rgb: Sequence[float]) -> int | None:
    """
    Find the palette entry closest to an RGB color.

    Uses Euclidean distance in RGB space. Ties resolve to the lowest index.

    Args:
        colors: Palette entries, in index order
        rgb: Color to match (r, g, b)

    Returns:
        Index of the closest entry, or None for an empty palette

    Example:
        >>> nearest_index([(0, 0, 0), (250, 0, 0)], (200, 10, 10))
        1
    """
    if not colors:
        return None
    frozen = tuple(tuple(entry) for entry in colors)
    return _nearest_index(frozen, tuple(rgb))


class PaletteTable(Mapping[str, tuple[RGBTriple, ...]]):
    """
    Immutable mapping of palette name to its ordered RGB entries.

    Example:
        >>> table = PaletteTable({"classic": [(0, 0, 0), (255, 0, 0)]})
        >>> table["classic"][1]
        (255, 0, 0)
        >>> table.names()
        ['classic']
    """

    def __init__(self, palettes: Mapping[str, Iterable[Sequence[int]]] | None = None):
        """
        Build a table, validating every palette.

        Args:
            palettes: Mapping of palette name to its RGB entries

        Raises:
            PaletteDataError: If any entry is not three integers in 0-255
        """
        data = {
            name: _validate_palette(name, colors) for name, colors in (palettes or {}).items()
        }
        self._palettes = MappingProxyType(data)

    def __getitem__(self, name: str) -> tuple[RGBTriple, ...]:
        return self._palettes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._palettes)

    def __len__(self) -> int:
        return len(self._palettes)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{name}={len(colors)}" for name, colors in self._palettes.items())
        return f"PaletteTable({sizes})"

    def names(self) -> list[str]:
        """Sorted palette names."""
        return sorted(self._palettes)

    def require(self, name: str) -> tuple[RGBTriple, ...]:
        """
        Get a palette by name, failing loudly.

        Rendering paths should use ``get`` (or let Color fall back to black);
        this is for explicit user requests such as ``palettes show``.

        Raises:
            UnknownPaletteError: If the palette is not loaded
        """
        try:
            return self._palettes[name]
        except KeyError:
            raise UnknownPaletteError(name, self._palettes.keys()) from None

    def merged(self, other: Mapping[str, Iterable[Sequence[int]]]) -> "PaletteTable":
        """
        Return a new table with ``other``'s palettes layered on top.

        Palettes in ``other`` replace same-named palettes in this table.
        Neither table is modified.
        """
        combined: dict[str, Iterable[Sequence[int]]] = dict(self._palettes)
        for name, colors in other.items():
            if name in combined:
                logger.info(f"Palette '{name}' overrides an existing palette")
            combined[name] = colors
        return PaletteTable(combined)

    def nearest_index(self, name: str, rgb: Sequence[float]) -> int | None:
        """
        Find the entry of palette ``name`` closest to ``rgb``.

        Returns:
            Palette index, or None if the palette is unknown or empty
        """
        colors = self._palettes.get(name)
        if colors is None:
            return None
        return nearest_index(colors, rgb)
