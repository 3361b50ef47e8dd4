"""Lengths with a unit of measurement.

:created: 2026-10-18

A Length is written as its value, rounded to two digits after the decimal point,
then the unit specifier: `Length(LengthUnit.PX, 3)` is "3.00px". Lengths compare
and hash by that rounded text, so 3.001px and 3.0px are the same Length.
"""

from __future__ import annotations

import dataclasses
import enum
import re

from svg_definitions.string_conversion import format_number
from svg_definitions.values.base import SvgValue
from svg_definitions.values.numbers import NUMBER, Percentage


class LengthUnit(enum.Enum):
    """SVG units of length. Value is the unit specifier."""

    EM = "em"
    EX = "ex"
    PX = "px"
    IN = "in"
    CM = "cm"
    MM = "mm"
    PT = "pt"
    PC = "pc"
    PERCENTAGE = "%"


_UNIT_SPECIFIERS = [re.escape(x.value) for x in LengthUnit]
_NUMBER_AND_UNIT = re.compile(
    rf"^(?P<number>{NUMBER})(?P<unit>{'|'.join(_UNIT_SPECIFIERS)})$"
)


@dataclasses.dataclass(frozen=True, eq=False)
class Length(SvgValue):
    """A number with a unit specifier."""

    unit: LengthUnit
    value: float

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit.value}"

    def __eq__(self, other: object) -> bool:
        """Also equal to a Percentage if this is a percentage length."""
        if isinstance(other, Percentage) and self.unit is LengthUnit.PERCENTAGE:
            return str(self) == str(other)
        return super().__eq__(other)

    __hash__ = SvgValue.__hash__

    @classmethod
    def from_pixels(cls, value: int) -> Length:
        """Create a pixel length.

        :param value: number of pixels
        :return: Length in px
        """
        return cls(LengthUnit.PX, value)

    @classmethod
    def from_percentage(cls, value: float) -> Length:
        """Create a percentage length.

        :param value: percentage, e.g. 50 for "50.00%"
        :return: Length in %
        """
        return cls(LengthUnit.PERCENTAGE, value)


def parse_length(text: str) -> Length:
    """Split the value and unit from a string.

    :param text: e.g. "55.32px" or "50%"
    :return: Length
    :raise ValueError: if text is not a number followed by a unit specifier
    """
    match = _NUMBER_AND_UNIT.match(text.strip())
    if match is None:
        msg = f"Cannot parse value and unit from {text!r}"
        raise ValueError(msg)
    return Length(LengthUnit(match["unit"]), float(match["number"]))
