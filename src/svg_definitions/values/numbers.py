"""Plain numeric attribute values.

:created: 2026-10-18
"""

from __future__ import annotations

import dataclasses
import re

from svg_definitions.string_conversion import format_number, format_ratio
from svg_definitions.values.base import SvgValue

NUMBER = r"[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
_INTEGER_RE = re.compile(r"^[-+]?[0-9]+$")
_NUMBER_RE = re.compile(rf"^{NUMBER}$")


@dataclasses.dataclass(frozen=True, eq=False)
class Integer(SvgValue):
    """A whole number, written as is."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclasses.dataclass(frozen=True, eq=False)
class Float(SvgValue):
    """A number written with two digits after the decimal point."""

    value: float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclasses.dataclass(frozen=True, eq=False)
class Percentage(SvgValue):
    """A number written with two decimal digits and a `%` suffix."""

    value: float

    def __str__(self) -> str:
        return f"{format_number(self.value)}%"


@dataclasses.dataclass(frozen=True, eq=False)
class Ratio(SvgValue):
    """A number in [0, 1] (alpha, opacity) written with four decimal digits.

    Values outside the interval are clamped.
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", min(1.0, max(0.0, float(self.value))))

    def __str__(self) -> str:
        return format_ratio(self.value)


def parse_number(text: str) -> Integer | Float:
    """Read an Integer or a Float from attribute text.

    :param text: e.g. "10" or "2.5"
    :return: Integer if text is a whole number without a decimal point, else Float
    :raises ValueError: if text is not a number
    """
    text = text.strip()
    if _INTEGER_RE.match(text):
        return Integer(int(text))
    if _NUMBER_RE.match(text):
        return Float(float(text))
    msg = f"Cannot parse a number from {text!r}"
    raise ValueError(msg)


def parse_ratio(text: str) -> Ratio:
    """Read an opacity value. Accepts "0.5" or "50%".

    :param text: attribute text
    :return: Ratio
    :raises ValueError: if text is not a number or a percentage
    """
    text = text.strip()
    if text.endswith("%"):
        return Ratio(float(text[:-1]) / 100)
    return Ratio(float(text))
