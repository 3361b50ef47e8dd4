"""Test the values of animation attributes.

:created: 2026-10-18
"""

import pytest

from svg_definitions import Attribute
from svg_definitions.exceptions import AttributeNotFoundError
from svg_definitions.values import (
    AttributeName,
    ClockUnit,
    Duration,
    Float,
    Indefinite,
    Integer,
    KeySplines,
    MotionRotate,
    ValueList,
    parse_attribute_name,
    parse_count,
    parse_duration,
    parse_key_splines,
    parse_motion_rotate,
    parse_value_list,
)


class TestDuration:
    def test_render(self):
        assert str(Duration(2)) == "2.00s"
        assert str(Duration(500, ClockUnit.MILLISECONDS)) == "500.00ms"

    def test_parse(self):
        """A number without a unit is in seconds."""
        assert parse_duration("2s") == Duration(2)
        assert parse_duration("4") == Duration(4)
        assert parse_duration("1.5min") == Duration(1.5, ClockUnit.MINUTES)
        assert parse_duration("300ms") == Duration(300, ClockUnit.MILLISECONDS)

    def test_indefinite(self):
        assert parse_duration("indefinite") is Indefinite.INDEFINITE

    @pytest.mark.parametrize("text", ["0:02", "2 s", "soon"])
    def test_parse_fails(self, text: str):
        with pytest.raises(ValueError):
            _ = parse_duration(text)

    def test_read_back(self):
        value = Duration(0.25, ClockUnit.HOURS)
        assert parse_duration(str(value)) == value


class TestCount:
    def test_parse(self):
        assert parse_count("3") == Integer(3)
        assert parse_count("0.5") == Float(0.5)
        assert parse_count("indefinite") is Indefinite.INDEFINITE

    def test_parse_fails(self):
        with pytest.raises(ValueError):
            _ = parse_count("forever")


class TestAttributeName:
    def test_render(self):
        assert str(AttributeName(Attribute.CX)) == "cx"
        assert str(AttributeName(Attribute.STROKE_WIDTH)) == "stroke-width"

    def test_parse(self):
        assert parse_attribute_name("cx") == AttributeName(Attribute.CX)

    def test_unknown(self):
        with pytest.raises(AttributeNotFoundError):
            _ = parse_attribute_name("not-an-attribute")


class TestValueList:
    def test_render(self):
        """Items are stripped and joined with "; "."""
        assert str(ValueList((" 0", "10 ", "0"))) == "0; 10; 0"

    def test_parse(self):
        assert parse_value_list("0;10;0") == ValueList(("0", "10", "0"))
        assert parse_value_list("red; blue;") == ValueList(("red", "blue"))

    def test_empty(self):
        with pytest.raises(ValueError):
            _ = parse_value_list(" ; ")


class TestKeySplines:
    def test_render(self):
        splines = KeySplines(((0.5, 0, 0.5, 1), (0, 0, 1, 1)))
        assert str(splines) == "0.50 0.00 0.50 1.00; 0.00 0.00 1.00 1.00"

    def test_parse(self):
        """Accept commas, spaces, and a trailing semicolon."""
        expect = KeySplines(((0.5, 0, 0.5, 1), (0, 0, 1, 1)))
        assert parse_key_splines("0.5 0 0.5 1; 0,0,1,1;") == expect

    def test_parse_fails(self):
        with pytest.raises(ValueError):
            _ = parse_key_splines("0.5 0 0.5; 0 0 1 1")


class TestMotionRotate:
    def test_parse(self):
        assert parse_motion_rotate("auto") is MotionRotate.AUTO
        assert parse_motion_rotate("auto-reverse") is MotionRotate.AUTO_REVERSE
        assert parse_motion_rotate("45") == Integer(45)

    def test_parse_fails(self):
        with pytest.raises(ValueError):
            _ = parse_motion_rotate("sideways")
