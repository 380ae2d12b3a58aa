"""Built-in firmware palettes.

The Launchpad family (MK2, Pro MK2, X, Pro MK3) and Matrix OS devices share
a 128-entry velocity palette: sending a note with velocity N lights the pad
with entry N. Values here are 8-bit RGB; devices that take 7-bit SysEx get
them through Color.to_7bit().
"""

from .table import PaletteTable, RGBTriple

LAUNCHPAD_PALETTE: tuple[RGBTriple, ...] = (
    # Greys/Whites (0-3)
    (0, 0, 0),  # 0 Black
    (28, 28, 28),  # 1 Dark grey
    (124, 124, 124),  # 2 Grey
    (252, 252, 252),  # 3 White
    # Reds (4-7)
    (254, 78, 72),  # 4 Red bright
    (254, 10, 0),  # 5 Red (pure)
    (90, 0, 0),  # 6 Red dark
    (24, 0, 2),  # 7 Red darker
    # Oranges (8-11)
    (254, 188, 98),  # 8 Orange bright
    (254, 86, 0),  # 9 Orange
    (90, 28, 0),  # 10 Orange dark
    (36, 24, 2),  # 11 Orange darker
    # Yellows (12-15)
    (252, 252, 32),  # 12 Yellow bright
    (252, 252, 0),  # 13 Yellow
    (88, 88, 0),  # 14 Yellow dark
    (24, 24, 0),  # 15 Yellow darker
    # Lime/Yellow-Green (16-19)
    (128, 252, 42),  # 16 Lime bright
    (64, 252, 0),  # 17 Lime
    (22, 88, 0),  # 18 Lime dark
    (18, 40, 0),  # 19 Lime darker
    # Green (20-23)
    (52, 252, 42),  # 20 Green bright
    (0, 254, 0),  # 21 Green (pure)
    (0, 88, 0),  # 22 Green dark
    (0, 24, 0),  # 23 Green darker
    # Spring Green (24-27)
    (52, 252, 70),  # 24 Spring green bright
    (0, 254, 0),  # 25 Spring green
    (0, 88, 0),  # 26 Spring green dark
    (0, 24, 0),  # 27 Spring green darker
    # Turquoise/Cyan (28-31)
    (50, 252, 126),  # 28 Turquoise bright
    (0, 252, 58),  # 29 Turquoise
    (0, 88, 20),  # 30 Turquoise dark
    (0, 28, 14),  # 31 Turquoise darker
    # Cyan (32-35)
    (46, 252, 176),  # 32 Cyan bright
    (0, 250, 144),  # 33 Cyan
    (0, 86, 50),  # 34 Cyan dark
    (0, 24, 16),  # 35 Cyan darker
    # Sky Blue (36-39)
    (56, 190, 254),  # 36 Sky blue bright
    (0, 166, 254),  # 37 Sky blue
    (0, 64, 80),  # 38 Sky blue dark
    (0, 16, 24),  # 39 Sky blue darker
    # Ocean Blue (40-43)
    (64, 134, 254),  # 40 Ocean blue bright
    (0, 80, 254),  # 41 Ocean blue
    (0, 26, 90),  # 42 Ocean blue dark
    (0, 6, 24),  # 43 Ocean blue darker
    # Blue (44-47)
    (70, 70, 254),  # 44 Blue bright
    (0, 0, 254),  # 45 Blue (pure)
    (0, 0, 90),  # 46 Blue dark
    (0, 0, 24),  # 47 Blue darker
    # Purple (48-51)
    (130, 70, 254),  # 48 Purple bright
    (80, 0, 254),  # 49 Purple
    (22, 0, 102),  # 50 Purple dark
    (10, 0, 50),  # 51 Purple darker
    # Magenta (52-55)
    (254, 72, 254),  # 52 Magenta bright
    (254, 0, 254),  # 53 Magenta (pure)
    (90, 0, 90),  # 54 Magenta dark
    (24, 0, 24),  # 55 Magenta darker
    # Pink (56-59)
    (250, 78, 130),  # 56 Pink bright
    (254, 6, 82),  # 57 Pink
    (90, 2, 26),  # 58 Pink dark
    (32, 0, 16),  # 59 Pink darker
    # Additional colors (60-127)
    (254, 24, 0),  # 60
    (154, 52, 0),  # 61
    (122, 80, 0),  # 62
    (62, 100, 0),  # 63
    (0, 56, 0),  # 64
    (0, 84, 50),  # 65
    (0, 82, 126),  # 66
    (0, 0, 254),  # 67 Blue pure
    (0, 68, 76),  # 68
    (26, 0, 208),  # 69
    (124, 124, 124),  # 70 Grey mid
    (32, 32, 32),  # 71 Grey dark
    (254, 10, 0),  # 72 Red pure
    (186, 252, 0),  # 73 Lime yellow
    (172, 236, 0),  # 74 Lime green
    (86, 252, 0),  # 75 Green lime
    (0, 136, 0),  # 76 Green pure
    (0, 252, 122),  # 77 Cyan green
    (0, 166, 254),  # 78 Sky
    (2, 26, 254),  # 79 Blue ocean
    (52, 0, 254),  # 80 Violet
    (120, 0, 254),  # 81 Purple blue
    (180, 22, 126),  # 82 Pink purple
    (64, 32, 0),  # 83 Brown dark
    (254, 74, 0),  # 84 Orange red
    (130, 224, 0),  # 85 Green yellow
    (102, 252, 0),  # 86 Lime bright alt
    (0, 254, 0),  # 87 Green bright alt
    (0, 254, 0),  # 88 Green alt
    (68, 252, 96),  # 89 Mint
    (0, 250, 202),  # 90 Cyan bright alt
    (80, 134, 254),  # 91 Blue sky
    (38, 76, 200),  # 92 Blue medium
    (132, 122, 236),  # 93 Lavender
    (210, 12, 254),  # 94 Magenta purple
    (254, 6, 90),  # 95 Rose
    (254, 124, 0),  # 96 Orange bright alt
    (184, 176, 0),  # 97 Yellow green
    (138, 252, 0),  # 98 Chartreuse
    (128, 92, 0),  # 99 Brown
    (58, 40, 2),  # 100 Brown darker
    (12, 76, 4),  # 101 Forest green dark
    (0, 80, 54),  # 102 Teal dark
    (18, 20, 40),  # 103 Navy
    (16, 30, 90),  # 104 Blue navy
    (106, 60, 24),  # 105 Brown mid
    (172, 4, 0),  # 106 Red crimson
    (224, 80, 54),  # 107 Coral
    (220, 104, 0),  # 108 Amber
    (254, 224, 0),  # 109 Gold
    (152, 224, 0),  # 110 Yellow lime
    (96, 180, 0),  # 111 Olive
    (26, 28, 48),  # 112 Dark blue
    (220, 252, 84),  # 113 Lime pastel
    (118, 250, 184),  # 114 Mint pastel
    (150, 152, 254),  # 115 Periwinkle
    (138, 98, 254),  # 116 Purple pastel
    (64, 64, 64),  # 117 Grey 40
    (116, 116, 116),  # 118 Grey 74
    (222, 252, 252),  # 119 Cyan pale
    (162, 4, 0),  # 120 Red maroon
    (52, 0, 0),  # 121 Maroon dark
    (0, 210, 0),  # 122 Green emerald
    (0, 64, 0),  # 123 Green forest
    (184, 176, 0),  # 124 Khaki
    (60, 48, 0),  # 125 Olive dark
    (180, 92, 0),  # 126 Rust
    (76, 18, 0),  # 127 Rust dark
)

BUILTIN_PALETTES: dict[str, tuple[RGBTriple, ...]] = {
    "launchpad": LAUNCHPAD_PALETTE,
}


def builtin_table() -> PaletteTable:
    """Table holding only the palettes that ship with launchlight."""
    return PaletteTable(BUILTIN_PALETTES)
