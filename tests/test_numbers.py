"""Test numbers, lengths, and view boxes.

:created: 2026-10-18
"""

import pytest

from svg_definitions.values.length import Length, LengthUnit, parse_length
from svg_definitions.values.numbers import (
    Float,
    Integer,
    Percentage,
    Ratio,
    parse_number,
    parse_ratio,
)
from svg_definitions.values.viewbox import ViewBox, parse_viewbox


class TestNumbers:
    def test_render(self):
        assert str(Integer(5)) == "5"
        assert str(Float(2.5)) == "2.50"
        assert str(Percentage(50)) == "50.00%"

    def test_ratio_clamped(self):
        """Ratios are limited to [0, 1]."""
        assert str(Ratio(0.25)) == "0.2500"
        assert str(Ratio(1.5)) == "1.0000"
        assert str(Ratio(-1)) == "0.0000"

    def test_parse_number(self):
        """Whole numbers become Integers, others Floats."""
        assert parse_number("10") == Integer(10)
        assert parse_number("2.5") == Float(2.5)
        assert parse_number("1e2") == Float(100)

    def test_parse_number_fails(self):
        with pytest.raises(ValueError):
            _ = parse_number("px")

    def test_parse_ratio(self):
        """Read opacity as a number or a percentage."""
        assert parse_ratio("0.5") == Ratio(0.5)
        assert parse_ratio("50%") == Ratio(0.5)


class TestLength:
    def test_render(self):
        """Write the rounded value then the unit."""
        assert str(Length(LengthUnit.PX, 3.0)) == "3.00px"
        assert str(Length(LengthUnit.EM, 1.5)) == "1.50em"
        assert str(Length.from_pixels(3)) == "3.00px"
        assert str(Length.from_percentage(50)) == "50.00%"

    def test_rounded_before_compare(self):
        """Lengths that write the same text are the same Length."""
        assert Length(LengthUnit.PX, 3.001) == Length(LengthUnit.PX, 3.0)
        assert hash(Length(LengthUnit.PX, 3.001)) == hash(Length(LengthUnit.PX, 3.0))

    def test_parse(self):
        assert parse_length("55.32px") == Length(LengthUnit.PX, 55.32)
        assert parse_length("50%") == Length.from_percentage(50)

    @pytest.mark.parametrize("text", ["5furlongs", "px", "5"])
    def test_parse_fails(self, text: str):
        with pytest.raises(ValueError):
            _ = parse_length(text)


class TestViewBox:
    def test_render(self):
        assert str(ViewBox(0, 0, 100, 100)) == "0 0 100 100"

    def test_whole_floats(self):
        """Whole floats are stored as ints."""
        viewbox = ViewBox(0.0, 0, 10.0, 10)
        assert str(viewbox) == "0 0 10 10"
        assert isinstance(viewbox.width, int)

    @pytest.mark.parametrize("x", [0.5, float("nan"), True])
    def test_not_whole(self, x: float):
        with pytest.raises(ValueError):
            _ = ViewBox(x, 0, 1, 1)

    def test_padded(self):
        """Pad all four sides by one value."""
        assert ViewBox(0, 0, 100, 100).padded(1) == ViewBox(-1, -1, 102, 102)

    def test_padded_trbl(self):
        """Pad top, right, bottom, left separately."""
        padded = ViewBox(0, 0, 100, 100).padded((1, 2, 3, 4))
        assert padded == ViewBox(-4, -1, 106, 104)

    def test_parse(self):
        """Accept spaces and commas between numbers."""
        assert parse_viewbox("0,0 10 10") == ViewBox(0, 0, 10, 10)
        assert parse_viewbox(" 0 0 1.0 2 ") == ViewBox(0, 0, 1, 2)

    @pytest.mark.parametrize("text", ["0 0 10", "0 0 1.5 10", "a b c d"])
    def test_parse_fails(self, text: str):
        with pytest.raises(ValueError):
            _ = parse_viewbox(text)
