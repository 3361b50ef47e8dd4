"""Test color values.

:created: 2026-10-18
"""

import pytest

from svg_definitions.exceptions import InvalidColorFormatError
from svg_definitions.values.color import (
    HSL,
    HexColor,
    hex_color,
    hsl,
    hsla,
    parse_color,
    rgb,
    rgba,
)


class TestRender:
    def test_rgb(self):
        assert str(rgb(1, 2, 3)) == "rgb(1,2,3)"

    def test_rgba(self):
        """Alpha is written with four decimal places."""
        assert str(rgba(1, 2, 3, 0.1)) == "rgba(1,2,3,0.1000)"

    def test_hsl(self):
        assert str(hsl(120, 50, 50)) == "hsl(120,50,50)"

    def test_hsla(self):
        assert str(hsla(120, 50, 50, 0.5)) == "hsla(120,50,50,0.5000)"

    def test_hex(self):
        """Hex colors are written lowercase with six digits."""
        assert str(hex_color("#00FF00")) == "#00ff00"
        assert str(HexColor(255, 170, 0)) == "#ffaa00"


class TestClamp:
    def test_rgb_channels(self):
        """Clamp rgb channels to [0, 255]."""
        assert str(rgb(300, -5, 3)) == "rgb(255,0,3)"

    def test_hsl_channels(self):
        """Clamp hsl channels to [0, 360] instead of rejecting them."""
        assert str(HSL(361, 2, 1)) == "hsl(360,2,1)"

    def test_alpha(self):
        """Clamp alpha to [0, 1]."""
        assert str(rgba(0, 0, 0, 2)) == "rgba(0,0,0,1.0000)"
        assert str(hsla(0, 0, 0, -1)) == "hsla(0,0,0,0.0000)"


class TestHexColor:
    def test_short_form(self):
        """Double each digit of a three-digit hex color."""
        assert hex_color("#fa0") == hex_color("#ffaa00")

    @pytest.mark.parametrize("text", ["#ff", "#gggggg", "ff0000", "#ff00000"])
    def test_invalid(self, text: str):
        with pytest.raises(InvalidColorFormatError):
            _ = hex_color(text)


class TestParseColor:
    def test_round_trip(self):
        """Read every notation a Color writes."""
        colors = [
            rgb(1, 2, 3),
            rgba(1, 2, 3, 0.25),
            hsl(360, 2, 1),
            hsla(10, 20, 30, 0.5),
            hex_color("#123456"),
        ]
        for color in colors:
            assert parse_color(str(color)) == color

    def test_spaces(self):
        """Accept spaces after commas."""
        assert parse_color("rgb(0, 0, 255)") == rgb(0, 0, 255)

    @pytest.mark.parametrize("text", ["red", "rgb(1,2)", "rgba(1,2,3)", "hsl(a,b,c)"])
    def test_invalid(self, text: str):
        """Named colors and wrong argument counts are not colors."""
        with pytest.raises(InvalidColorFormatError):
            _ = parse_color(text)

    def test_notations_are_distinct(self):
        """An rgb color is not equal to a hex color with the same channels."""
        assert rgb(255, 0, 0) != hex_color("#f00")
