"""Unit tests for the Color model."""

import json

import pytest
from pydantic import ValidationError

from launchlight.models import (
    Color,
    ColorType,
    PaletteColor,
    RGBAColor,
    RGBColor,
    UnsetColor,
)


class TestConstruction:
    """Test building colors."""

    @pytest.mark.unit
    def test_from_value_palette(self):
        """Palette payload is [name, index]."""
        color = Color.from_value(ColorType.PALETTE, ["classic", 5])
        assert isinstance(color, PaletteColor)
        assert color.value == ("classic", 5)

    @pytest.mark.unit
    def test_from_value_accepts_type_strings(self):
        """The type tag may be given as its string value."""
        assert Color.from_value("rgb", [1, 2, 3]) == RGBColor(r=1, g=2, b=3)
        assert Color.from_value("rgba", [1, 2, 3, 4]) == RGBAColor(r=1, g=2, b=3, a=4)

    @pytest.mark.unit
    def test_from_value_missing_parts_is_unset(self):
        """No type or no payload gives the unset color."""
        assert isinstance(Color.from_value(None), UnsetColor)
        assert isinstance(Color.from_value(ColorType.RGB, None), UnsetColor)

    @pytest.mark.unit
    @pytest.mark.parametrize("color_type,value", [
        (ColorType.PALETTE, ["classic"]),
        (ColorType.RGB, [1, 2]),
        (ColorType.RGB, [1, 2, 3, 4]),
        (ColorType.RGBA, [1, 2, 3]),
    ])
    def test_from_value_rejects_wrong_shape(self, color_type, value):
        """Payload length must match the type."""
        with pytest.raises(ValueError):
            Color.from_value(color_type, value)

    @pytest.mark.unit
    def test_type_tags(self):
        """Each variant carries its own type tag."""
        assert Color.unset().type == ColorType.UNSET
        assert Color.from_palette("classic", 1).type == ColorType.PALETTE
        assert Color.from_rgb(1, 2, 3).type == ColorType.RGB
        assert Color.from_rgb(1, 2, 3).to_rgba().type == ColorType.RGBA

    @pytest.mark.unit
    def test_frozen(self):
        """Colors cannot be modified in place."""
        color = Color.from_rgb(1, 2, 3)
        with pytest.raises(ValidationError):
            color.r = 10

    @pytest.mark.unit
    def test_hashable_value_semantics(self):
        """Equal colors compare and hash equal."""
        assert Color.from_rgb(1, 2, 3) == RGBColor(r=1, g=2, b=3)
        assert len({Color.from_rgb(1, 2, 3), Color.from_rgb(1, 2, 3), Color.unset()}) == 2


class TestFromString:
    """Test the compact text form."""

    @pytest.mark.unit
    def test_forms(self):
        """Every variant has a text form."""
        assert Color.from_string("unset") == UnsetColor()
        assert Color.from_string("palette:classic:5") == PaletteColor(palette="classic", index=5)
        assert Color.from_string("rgb:255,128,0") == RGBColor(r=255, g=128, b=0)
        assert Color.from_string("rgba:255,0,0,128") == RGBAColor(r=255, g=0, b=0, a=128)

    @pytest.mark.unit
    def test_palette_name_may_contain_colons(self):
        """Only the last colon separates the index."""
        color = Color.from_string("palette:user:mk2:7")
        assert color.palette_name == "user:mk2"
        assert color.palette_index == 7

    @pytest.mark.unit
    def test_float_channels(self):
        """Channels may be floats."""
        assert Color.from_string("rgb:12.5, 0, 3").value == (12.5, 0, 3)

    @pytest.mark.unit
    @pytest.mark.parametrize("text", [
        "",
        "hsl:1,2,3",
        "rgb:1,2",
        "rgb:a,b,c",
        "palette:classic",
        "palette:classic:x",
        "unset:1",
    ])
    def test_malformed(self, text):
        """Malformed text raises ValueError."""
        with pytest.raises(ValueError):
            Color.from_string(text)


class TestSerialization:
    """Test dumping and parsing colors."""

    @pytest.mark.unit
    @pytest.mark.parametrize("color", [
        Color.unset(),
        Color.from_palette("classic", 5),
        Color.from_rgb(12, 200, 40),
        RGBAColor(r=255, g=0, b=0, a=128),
    ])
    def test_json_round_trip(self, color):
        """model_dump_json output parses back to the same variant."""
        parsed = Color.parse(json.loads(color.model_dump_json()))
        assert parsed == color
        assert type(parsed) is type(color)

    @pytest.mark.unit
    def test_dump_shape(self):
        """Serialized colors carry a type tag and named fields."""
        assert Color.from_palette("classic", 5).model_dump() == {
            "type": "palette",
            "palette": "classic",
            "index": 5,
        }

    @pytest.mark.unit
    def test_parse_rejects_unknown_type(self):
        """An unknown tag fails validation."""
        with pytest.raises(ValidationError):
            Color.parse({"type": "hsl", "h": 0})


class TestResolution:
    """Test rgb(), to_css() and is_black()."""

    @pytest.mark.unit
    def test_palette_entries_resolve_exactly(self, classic_table):
        """Every stored entry comes back unchanged."""
        for index, expected in enumerate(classic_table["classic"]):
            assert Color.from_palette("classic", index).rgb(classic_table) == expected

    @pytest.mark.unit
    def test_palette_display_string(self, classic_table):
        """classic[5] renders as its stored triple."""
        assert Color.from_palette("classic", 5).to_css(classic_table) == "rgb(12, 200, 40)"

    @pytest.mark.unit
    def test_unknown_palette_is_black(self, classic_table):
        """An unknown palette name resolves to black."""
        color = Color.from_palette("nope", 1)
        assert color.rgb(classic_table) == (0, 0, 0)
        assert color.is_black(classic_table)

    @pytest.mark.unit
    def test_missing_table_is_black(self):
        """A palette color with no table resolves to black."""
        assert Color.from_palette("classic", 5).rgb() == (0, 0, 0)

    @pytest.mark.unit
    @pytest.mark.parametrize("index", [6, 100, -1])
    def test_index_outside_palette_is_black(self, classic_table, index):
        """Indices outside 0..N-1 resolve to black instead of wrapping or failing."""
        assert Color.from_palette("classic", index).rgb(classic_table) == (0, 0, 0)

    @pytest.mark.unit
    def test_plain_dict_lookup(self):
        """Any mapping of name to entries works as a lookup."""
        lookup = {"tiny": [[1, 2, 3]]}
        assert Color.from_palette("tiny", 0).rgb(lookup) == (1, 2, 3)

    @pytest.mark.unit
    def test_unset(self):
        """Unset is black everywhere."""
        color = Color.unset()
        assert color.rgb() == (0, 0, 0)
        assert color.to_css() == "rgb(0, 0, 0)"
        assert color.is_black()

    @pytest.mark.unit
    def test_rgb_values_used_as_given(self):
        """Out-of-range and fractional channels are not clamped or rounded."""
        color = Color.from_rgb(300, -5, 12.5)
        assert color.rgb() == (300, -5, 12.5)
        assert color.to_css() == "rgb(300, -5, 12.5)"

    @pytest.mark.unit
    def test_integral_floats_print_without_fraction(self):
        """100.0 prints as 100."""
        assert Color.from_rgb(100.0, 0.0, 7.25).to_css() == "rgb(100, 0, 7.25)"

    @pytest.mark.unit
    def test_rgba_resolution_ignores_alpha(self):
        """RGB resolution of an RGBA color drops alpha; the CSS form keeps it."""
        color = RGBAColor(r=255, g=0, b=0, a=128)
        assert color.rgb() == (255, 0, 0)
        assert color.to_css() == "rgba(255, 0, 0, 128)"

    @pytest.mark.unit
    def test_is_black(self, classic_table):
        """Only all-zero channels count as black."""
        assert Color.from_palette("classic", 0).is_black(classic_table)
        assert not Color.from_palette("classic", 1).is_black(classic_table)
        assert not Color.from_rgb(0, 0, 1).is_black()
        assert Color.from_rgb(0, 0.0, 0).is_black()

    @pytest.mark.unit
    def test_palette_accessors(self):
        """Name and index are only reported for palette colors."""
        palette = Color.from_palette("classic", 5)
        assert palette.palette_name == "classic"
        assert palette.palette_index == 5

        for other in (Color.unset(), Color.from_rgb(1, 2, 3), RGBAColor(r=1, g=2, b=3, a=4)):
            assert other.palette_name is None
            assert other.palette_index is None


class TestToRgba:
    """Test splitting brightness into alpha."""

    @pytest.mark.unit
    def test_full_red(self):
        """Full red keeps its channels and gets alpha 255."""
        rgba = Color.from_rgb(255, 0, 0).to_rgba()
        assert isinstance(rgba, RGBAColor)
        assert rgba.value == (255, 0, 0, 255)

    @pytest.mark.unit
    def test_dim_red_becomes_bright_red_with_alpha(self):
        """Brightness moves into alpha on the 0-255 scale."""
        assert Color.from_rgb(128, 0, 0).to_rgba().value == (255, 0, 0, 128)

    @pytest.mark.unit
    def test_dim_mixed_color(self):
        """Hue and saturation survive, brightness goes to alpha."""
        assert Color.from_rgb(0, 50, 200).to_rgba().value == (0, 64, 255, 200)

    @pytest.mark.unit
    def test_grey_becomes_white(self):
        """Greys have no saturation, so they become white with their level as alpha."""
        assert Color.from_rgb(100, 100, 100).to_rgba().value == (255, 255, 255, 100)

    @pytest.mark.unit
    def test_unset_becomes_transparent_white(self):
        """Black has zero brightness."""
        assert Color.unset().to_rgba().value == (255, 255, 255, 0)

    @pytest.mark.unit
    def test_negative_channels_degrade_to_transparent_white(self):
        """Channels below zero with no positive channel convert without raising."""
        assert Color.from_rgb(0, -10, 0).to_rgba().value == (255, 255, 255, 0)

        rgba = Color.from_rgb(-10, -20, -30).to_rgba()
        assert rgba.value[:3] == (255, 255, 255)
        assert rgba.a <= 0

    @pytest.mark.unit
    def test_palette_color(self, classic_table):
        """Palette colors resolve before converting."""
        assert Color.from_palette("classic", 2).to_rgba(classic_table).value == (255, 0, 0, 255)

    @pytest.mark.unit
    def test_does_not_modify_receiver(self):
        """to_rgba returns a new color."""
        color = Color.from_rgb(128, 0, 0)
        color.to_rgba()
        assert color.value == (128, 0, 0)

    @pytest.mark.unit
    def test_rgba_tuple(self):
        """rgba() converts other variants and passes RGBA through."""
        assert Color.from_rgb(128, 0, 0).rgba() == (255, 0, 0, 128)
        assert RGBAColor(r=1, g=2, b=3, a=4).rgba() == (1, 2, 3, 4)


class TestOverlay:
    """Test compositing one color over another."""

    @pytest.mark.unit
    @pytest.mark.parametrize("base", [(0, 0, 0), (10, 200, 30), (255, 255, 255)])
    def test_black_leaves_base(self, base):
        """Black on top leaves the base unchanged."""
        result = Color.from_rgb(0, 0, 0).overlay(Color.from_rgb(*base))
        assert result.rgb() == base

    @pytest.mark.unit
    @pytest.mark.parametrize("base", [(0, 0, 0), (10, 200, 30), (255, 255, 255)])
    def test_white_gives_white(self, base):
        """White on top gives white."""
        result = Color.from_rgb(255, 255, 255).overlay(Color.from_rgb(*base))
        assert result.rgb() == (255, 255, 255)

    @pytest.mark.unit
    def test_grey_over_black(self):
        """Grey over black is the grey itself."""
        result = Color.from_rgb(100, 100, 100).overlay(Color.from_rgb(0, 0, 0))
        assert result.rgb() == (100, 100, 100)
        assert result.to_css() == "rgb(100, 100, 100)"

    @pytest.mark.unit
    def test_channels_are_independent(self):
        """Each channel blends on its own."""
        result = Color.from_rgb(255, 0, 51).overlay(Color.from_rgb(0, 100, 0))
        assert result.rgb() == pytest.approx((255, 100, 51))

    @pytest.mark.unit
    def test_partial_blend(self):
        """A channel moves toward 255 by top/255 of the remaining distance."""
        result = Color.from_rgb(51, 0, 0).overlay(Color.from_rgb(55, 0, 0))
        assert result.r == pytest.approx(55 + 200 * 51 / 255)

    @pytest.mark.unit
    def test_not_idempotent(self):
        """Applying a grey overlay twice lightens further."""
        grey = Color.from_rgb(100, 100, 100)
        once = grey.overlay(Color.unset())
        twice = grey.overlay(once)
        assert twice.rgb() != once.rgb()
        assert twice.r > once.r

    @pytest.mark.unit
    def test_resolves_palette_colors(self, classic_table):
        """Both sides resolve through the palette table; result is RGB."""
        top = Color.from_palette("classic", 2)
        base = Color.from_palette("classic", 4)
        result = top.overlay(base, classic_table)
        assert isinstance(result, RGBColor)
        assert result.rgb() == (255, 0, 255)

    @pytest.mark.unit
    def test_inputs_unchanged(self):
        """Neither input is modified."""
        top = Color.from_rgb(10, 20, 30)
        base = Color.from_rgb(40, 50, 60)
        top.overlay(base)
        assert top.value == (10, 20, 30)
        assert base.value == (40, 50, 60)


class TestDeviceEncoding:
    """Test conversions used when sending colors to hardware."""

    @pytest.mark.unit
    def test_to_7bit(self):
        """8-bit channels shift down to 7-bit."""
        assert Color.from_rgb(255, 128, 0).to_7bit() == (127, 64, 0)

    @pytest.mark.unit
    def test_to_7bit_clamps(self):
        """Out-of-range channels are clamped before shifting."""
        assert Color.from_rgb(300, -5, 12.6).to_7bit() == (127, 0, 6)

    @pytest.mark.unit
    def test_to_palette_nearest(self, builtin_palettes):
        """Re-encoding picks the closest palette entry."""
        encoded = Color.from_rgb(250, 5, 0).to_palette("launchpad", builtin_palettes)
        assert encoded == PaletteColor(palette="launchpad", index=5)

    @pytest.mark.unit
    def test_to_palette_exact_entry(self, classic_table):
        """A color that is already in the palette maps to its index."""
        encoded = Color.from_rgb(12, 200, 40).to_palette("classic", classic_table)
        assert encoded.palette_index == 5

    @pytest.mark.unit
    def test_to_palette_unknown(self, classic_table):
        """An unknown palette gives the unset color."""
        assert Color.from_rgb(1, 2, 3).to_palette("nope", classic_table) == UnsetColor()
        assert Color.from_rgb(1, 2, 3).to_palette("classic") == UnsetColor()
