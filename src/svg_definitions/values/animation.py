"""Values of the animate, animateMotion, animateTransform, and set attributes.

:created: 2026-10-18

    >>> str(Duration(2))
    '2.00s'
    >>> str(KeySplines(((0.5, 0, 0.5, 1),)))
    '0.50 0.00 0.50 1.00'

List values (`values`, `keySplines`) are written with "; " between items.
"""

from __future__ import annotations

import dataclasses
import enum
import re
from typing import TypeAlias

from svg_definitions.attributes import Attribute
from svg_definitions.string_conversion import format_number, format_numbers
from svg_definitions.values.base import SvgValue
from svg_definitions.values.keywords import Keyword
from svg_definitions.values.numbers import NUMBER, Float, Integer, parse_number

_LIST_SEPARATOR = "; "


class ClockUnit(enum.Enum):
    """Units of a timecount value. Value is the unit specifier."""

    HOURS = "h"
    MINUTES = "min"
    SECONDS = "s"
    MILLISECONDS = "ms"


_TIMECOUNT = re.compile(
    rf"^(?P<number>{NUMBER})(?P<unit>{'|'.join(u.value for u in ClockUnit)})?$"
)


class Indefinite(Keyword):
    """The keyword for an unbounded duration or repeat count."""

    INDEFINITE = "indefinite"


class MotionRotate(Keyword):
    """Keywords of the animateMotion rotate attribute."""

    AUTO = "auto"
    AUTO_REVERSE = "auto-reverse"


@dataclasses.dataclass(frozen=True, eq=False)
class Duration(SvgValue):
    """A timecount value like "2.00s" or "500.00ms"."""

    value: float
    unit: ClockUnit = ClockUnit.SECONDS

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit.value}"


@dataclasses.dataclass(frozen=True, eq=False)
class AttributeName(SvgValue):
    """The attribute an animation changes."""

    attribute: Attribute

    def __str__(self) -> str:
        return self.attribute.value


@dataclasses.dataclass(frozen=True, eq=False)
class ValueList(SvgValue):
    """The values an animation steps through, e.g. "0; 10; 0"."""

    items: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(x.strip() for x in self.items))

    def __str__(self) -> str:
        return _LIST_SEPARATOR.join(self.items)


@dataclasses.dataclass(frozen=True, eq=False)
class KeySplines(SvgValue):
    """Bezier control points (x1, y1, x2, y2) for each animation interval."""

    splines: tuple[tuple[float, float, float, float], ...]

    def __str__(self) -> str:
        splines = (" ".join(format_numbers(s)) for s in self.splines)
        return _LIST_SEPARATOR.join(splines)


Count: TypeAlias = Integer | Float | Indefinite


def parse_duration(text: str) -> Duration | Indefinite:
    """Read a dur or repeatDur value.

    :param text: a timecount ("2s", "1.5min", "300ms", "4") or "indefinite". A
        number without a unit is in seconds.
    :return: Duration or Indefinite.INDEFINITE
    :raises ValueError: for anything else, including full clock values ("0:02")
    """
    text = text.strip()
    if text == Indefinite.INDEFINITE.value:
        return Indefinite.INDEFINITE
    match = _TIMECOUNT.match(text)
    if match is None:
        msg = f"Cannot parse a duration from {text!r}"
        raise ValueError(msg)
    unit = ClockUnit(match["unit"]) if match["unit"] else ClockUnit.SECONDS
    return Duration(float(match["number"]), unit)


def parse_count(text: str) -> Count:
    """Read a repeatCount value.

    :param text: a number or "indefinite"
    :return: Integer, Float, or Indefinite.INDEFINITE
    :raises ValueError: if text is neither
    """
    text = text.strip()
    if text == Indefinite.INDEFINITE.value:
        return Indefinite.INDEFINITE
    return parse_number(text)


def parse_attribute_name(text: str) -> AttributeName:
    """Read an attributeName value.

    :raises AttributeNotFoundError: if text names no svg attribute
    """
    return AttributeName(Attribute.from_name(text.strip()))


def parse_value_list(text: str) -> ValueList:
    """Split a semicolon-separated list. A trailing semicolon is allowed.

    :raises ValueError: if the list is empty
    """
    items = text.strip().removesuffix(";").split(";")
    if not any(x.strip() for x in items):
        msg = f"Cannot parse a list of values from {text!r}"
        raise ValueError(msg)
    return ValueList(tuple(items))


def parse_key_splines(text: str) -> KeySplines:
    """Read a keySplines value.

    :param text: groups of four numbers separated by semicolons
    :return: KeySplines
    :raises ValueError: if any group is not four numbers
    """
    splines: list[tuple[float, float, float, float]] = []
    for group in text.strip().removesuffix(";").split(";"):
        numbers = [float(x) for x in re.split(r"[\s,]+", group.strip()) if x]
        if len(numbers) != 4:
            msg = f"Each key spline needs 4 numbers, not {group!r}"
            raise ValueError(msg)
        x1, y1, x2, y2 = numbers
        splines.append((x1, y1, x2, y2))
    return KeySplines(tuple(splines))


def parse_motion_rotate(text: str) -> MotionRotate | Integer | Float:
    """Read the rotate attribute of animateMotion: "auto", "auto-reverse", or an
    angle.

    :raises ValueError: if text is none of these
    """
    text = text.strip()
    try:
        return MotionRotate(text)
    except ValueError:
        return parse_number(text)
