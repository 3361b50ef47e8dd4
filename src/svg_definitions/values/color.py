"""Colors in rgb, rgba, hsl, hsla, and hex notation.

:created: 2026-10-18

Channels are clamped, never rejected. RGB channels are clamped to [0, 255]. Hue,
saturation, and light are clamped to [0, 360], so `HSL(361, 2, 1)` is written as
`hsl(360,2,1)`. Alpha is a Ratio, clamped to [0, 1] and written with four digits.

Each notation is its own type, and each renders exactly its own css functional
notation. An RGB and a HexColor with the same channels are different values.
"""

from __future__ import annotations

import dataclasses
import re
from typing import TypeAlias

from svg_definitions.exceptions import InvalidColorFormatError
from svg_definitions.values.base import SvgValue
from svg_definitions.values.numbers import Ratio

_MAX_8BIT = 255
_MAX_HSL = 360

_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_FUNCTIONAL = re.compile(r"^(rgba?|hsla?)\(([^()]*)\)$")


def _clamp(value: float, high: int) -> int:
    """Clamp a channel value to an int in [0, high].

    :param value: channel value
    :param high: maximum channel value
    :return: int in the closed interval [0 .. high]
    """
    return min(high, max(0, int(value)))


def _as_ratio(alpha: Ratio | float) -> Ratio:
    if isinstance(alpha, Ratio):
        return alpha
    return Ratio(alpha)


@dataclasses.dataclass(frozen=True, eq=False)
class RGB(SvgValue):
    """An rgb color, each channel in [0, 255]."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            object.__setattr__(self, name, _clamp(getattr(self, name), _MAX_8BIT))

    def __str__(self) -> str:
        return f"rgb({self.red},{self.green},{self.blue})"


@dataclasses.dataclass(frozen=True, eq=False)
class RGBA(SvgValue):
    """An rgb color with an alpha channel."""

    red: int
    green: int
    blue: int
    alpha: Ratio

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            object.__setattr__(self, name, _clamp(getattr(self, name), _MAX_8BIT))
        object.__setattr__(self, "alpha", _as_ratio(self.alpha))

    def __str__(self) -> str:
        return f"rgba({self.red},{self.green},{self.blue},{self.alpha})"


@dataclasses.dataclass(frozen=True, eq=False)
class HSL(SvgValue):
    """A hue, saturation, light color, each channel clamped to [0, 360]."""

    hue: int
    saturation: int
    light: int

    def __post_init__(self) -> None:
        for name in ("hue", "saturation", "light"):
            object.__setattr__(self, name, _clamp(getattr(self, name), _MAX_HSL))

    def __str__(self) -> str:
        return f"hsl({self.hue},{self.saturation},{self.light})"


@dataclasses.dataclass(frozen=True, eq=False)
class HSLA(SvgValue):
    """An hsl color with an alpha channel."""

    hue: int
    saturation: int
    light: int
    alpha: Ratio

    def __post_init__(self) -> None:
        for name in ("hue", "saturation", "light"):
            object.__setattr__(self, name, _clamp(getattr(self, name), _MAX_HSL))
        object.__setattr__(self, "alpha", _as_ratio(self.alpha))

    def __str__(self) -> str:
        return f"hsla({self.hue},{self.saturation},{self.light},{self.alpha})"


@dataclasses.dataclass(frozen=True, eq=False)
class HexColor(SvgValue):
    """An rgb color written as `#rrggbb`. Create one with `hex_color`."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            object.__setattr__(self, name, _clamp(getattr(self, name), _MAX_8BIT))

    def __str__(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


Color: TypeAlias = RGB | RGBA | HSL | HSLA | HexColor


def rgb(red: int, green: int, blue: int) -> RGB:
    """Create an rgb color.

    :return: RGB, e.g. "rgb(1,2,3)"
    """
    return RGB(red, green, blue)


def rgba(red: int, green: int, blue: int, alpha: float) -> RGBA:
    """Create an rgb color with alpha.

    :return: RGBA, e.g. "rgba(1,2,3,0.1000)"
    """
    return RGBA(red, green, blue, Ratio(alpha))


def hsl(hue: int, saturation: int, light: int) -> HSL:
    """Create an hsl color. Channels above 360 are clamped to 360.

    :return: HSL, e.g. "hsl(360,2,1)"
    """
    return HSL(hue, saturation, light)


def hsla(hue: int, saturation: int, light: int, alpha: float) -> HSLA:
    """Create an hsl color with alpha.

    :return: HSLA, e.g. "hsla(120,50,50,0.5000)"
    """
    return HSLA(hue, saturation, light, Ratio(alpha))


def hex_color(text: str) -> HexColor:
    """Create a HexColor from `#rgb` or `#rrggbb`.

    :param text: hex color string with leading `#`. Three-digit strings have each
        digit doubled, so "#fa0" is "#ffaa00".
    :return: HexColor
    :raises InvalidColorFormatError: if text is not `#` and 3 or 6 hex digits
    """
    match = _HEX_COLOR.match(text.strip())
    if match is None:
        raise InvalidColorFormatError(text)
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return HexColor(red, green, blue)


def _parse_functional(text: str) -> Color:
    """Read rgb(), rgba(), hsl(), or hsla() notation.

    :param text: stripped color string
    :return: Color
    :raises InvalidColorFormatError: if the name or the argument count is wrong
    """
    match = _FUNCTIONAL.match(text)
    if match is None:
        raise InvalidColorFormatError(text)
    name = match.group(1)
    args = [a for a in re.split(r"[\s,]+", match.group(2).strip()) if a]
    try:
        channels = [int(a) for a in args[:3]]
        alpha = [float(a) for a in args[3:]]
    except ValueError as e:
        raise InvalidColorFormatError(text) from e
    alpha_count = 1 if name.endswith("a") else 0
    if len(channels) != 3 or len(args) != 3 + alpha_count:
        raise InvalidColorFormatError(text)
    if name == "rgb":
        return rgb(*channels)
    if name == "rgba":
        return rgba(*channels, alpha[0])
    if name == "hsl":
        return hsl(*channels)
    return hsla(*channels, alpha[0])


def parse_color(text: str) -> Color:
    """Read any color notation that a Color renders.

    :param text: e.g. "#fff", "#00ff00", "rgb(1,2,3)", "hsla(1,2,3,0.5)"
    :return: the matching Color type
    :raises InvalidColorFormatError: if text is none of these notations
    """
    text = text.strip()
    if text.startswith("#"):
        return hex_color(text)
    return _parse_functional(text)
