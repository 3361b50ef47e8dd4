"""Every kind of value an svg attribute can hold, and conversions into them.

:created: 2026-10-18

Element.set and new_element accept plain Python values as well as the types
defined in this package. `to_attribute_value` decides what a plain value becomes:

    * int -> Integer
    * float -> Float
    * (x, y, width, height) -> ViewBox
    * str -> read with the parser for the target attribute
    * None -> "none" read with the parser for the target attribute

String values are read leniently. If no typed value fits the text, the text is
kept as a RawValue and written back unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeAlias

from svg_definitions.attributes import Attribute
from svg_definitions.exceptions import InvalidCharacterError
from svg_definitions.values.animation import (
    AttributeName,
    Duration,
    KeySplines,
    ValueList,
    parse_attribute_name,
    parse_count,
    parse_duration,
    parse_key_splines,
    parse_motion_rotate,
    parse_value_list,
)
from svg_definitions.values.base import RawValue, SvgValue
from svg_definitions.values.color import RGB, Color, parse_color
from svg_definitions.values.identifier import (
    Identifier,
    Reference,
    UrlReference,
    parse_reference,
    parse_url_reference,
)
from svg_definitions.values.keywords import (
    Accumulate,
    Additive,
    CalcMode,
    FillRule,
    Keyword,
    NoneKeyword,
    Restart,
    SpreadMethod,
    StrokeLinecap,
    StrokeLinejoin,
    TextAnchor,
    Units,
    Visibility,
)
from svg_definitions.values.length import Length, LengthUnit, parse_length
from svg_definitions.values.numbers import (
    Float,
    Integer,
    Percentage,
    Ratio,
    parse_number,
    parse_ratio,
)
from svg_definitions.values.paint import PaintServer, parse_paint
from svg_definitions.values.path_data import PathData
from svg_definitions.values.transform import TransformList
from svg_definitions.values.viewbox import ViewBox, parse_viewbox

if TYPE_CHECKING:
    from collections.abc import Callable

_LOGGER = logging.getLogger(__name__)

AttributeValue: TypeAlias = (
    ViewBox
    | Identifier
    | Reference
    | UrlReference
    | Color
    | Length
    | Integer
    | Float
    | Percentage
    | Ratio
    | PaintServer
    | Keyword
    | PathData
    | TransformList
    | Duration
    | AttributeName
    | ValueList
    | KeySplines
    | RawValue
)

# anything `to_attribute_value` will accept
AttributeArg: TypeAlias = (
    "AttributeValue | Attribute | str | int | float | tuple[int, int, int, int] | None"
)


# ===================================================================================
#   Named constructors
# ===================================================================================


def new_viewbox(x: int, y: int, width: int, height: int) -> ViewBox:
    """Create a viewBox value.

    :return: ViewBox, e.g. "0 0 100 100"
    """
    return ViewBox(x, y, width, height)


def new_id(text: str) -> Identifier:
    """Create an id value.

    :param text: ascii letters, digits, `-`, `_`, and spaces
    :return: Identifier
    :raises InvalidCharacterError: if text has any other character
    """
    return Identifier(text)


def new_color(red: int, green: int, blue: int) -> RGB:
    """Create an rgb color. For other notations see `values.color`.

    :return: RGB, e.g. "rgb(1,2,3)"
    """
    return RGB(red, green, blue)


def new_integer(value: int) -> Integer:
    return Integer(value)


def new_float(value: float) -> Float:
    return Float(value)


def new_percentage(value: float) -> Percentage:
    """Create a percentage. 50 is "50.00%"."""
    return Percentage(value)


def new_length(unit: LengthUnit, value: float) -> Length:
    return Length(unit, value)


def new_path_definition(path: PathData) -> PathData:
    """Use a PathData as the value of a `d` attribute.

    PathData is immutable, so the same instance is returned.
    """
    return path


# ===================================================================================
#   Read attribute strings
# ===================================================================================


def _parse_url_or_none(text: str) -> UrlReference | NoneKeyword:
    """Read a clip-path, mask, filter, or marker value.

    :raises ValueError: if text is neither "none" nor `url(#id)`
    """
    if text.strip() == NoneKeyword.NONE.value:
        return NoneKeyword.NONE
    return parse_url_reference(text)


_PARSERS: dict[Attribute, Callable[[str], AttributeValue]] = {
    Attribute.VIEW_BOX: parse_viewbox,
    Attribute.ID: Identifier,
    Attribute.HREF: parse_reference,
    Attribute.XLINK_HREF: parse_reference,
    Attribute.D: PathData.from_svgd,
    Attribute.FILL: parse_paint,
    Attribute.STROKE: parse_paint,
    Attribute.COLOR: parse_color,
    Attribute.STOP_COLOR: parse_color,
    Attribute.FLOOD_COLOR: parse_color,
    Attribute.LIGHTING_COLOR: parse_color,
    Attribute.OPACITY: parse_ratio,
    Attribute.FILL_OPACITY: parse_ratio,
    Attribute.STROKE_OPACITY: parse_ratio,
    Attribute.STOP_OPACITY: parse_ratio,
    Attribute.FLOOD_OPACITY: parse_ratio,
    Attribute.TRANSFORM: TransformList.from_str,
    Attribute.GRADIENT_TRANSFORM: TransformList.from_str,
    Attribute.PATTERN_TRANSFORM: TransformList.from_str,
    Attribute.CLIP_PATH: _parse_url_or_none,
    Attribute.MASK: _parse_url_or_none,
    Attribute.FILTER: _parse_url_or_none,
    Attribute.MARKER_START: _parse_url_or_none,
    Attribute.MARKER_MID: _parse_url_or_none,
    Attribute.MARKER_END: _parse_url_or_none,
    Attribute.DUR: parse_duration,
    Attribute.REPEAT_DUR: parse_duration,
    Attribute.REPEAT_COUNT: parse_count,
    Attribute.ATTRIBUTE_NAME: parse_attribute_name,
    Attribute.VALUES: parse_value_list,
    Attribute.KEY_SPLINES: parse_key_splines,
    Attribute.ROTATE: parse_motion_rotate,
}

_KEYWORD_ATTRIBUTES: dict[Attribute, type[Keyword]] = {
    Attribute.FILL_RULE: FillRule,
    Attribute.CLIP_RULE: FillRule,
    Attribute.STROKE_LINECAP: StrokeLinecap,
    Attribute.STROKE_LINEJOIN: StrokeLinejoin,
    Attribute.SPREAD_METHOD: SpreadMethod,
    Attribute.GRADIENT_UNITS: Units,
    Attribute.PATTERN_UNITS: Units,
    Attribute.PATTERN_CONTENT_UNITS: Units,
    Attribute.CLIP_PATH_UNITS: Units,
    Attribute.MASK_UNITS: Units,
    Attribute.MASK_CONTENT_UNITS: Units,
    Attribute.FILTER_UNITS: Units,
    Attribute.PRIMITIVE_UNITS: Units,
    Attribute.VISIBILITY: Visibility,
    Attribute.TEXT_ANCHOR: TextAnchor,
    Attribute.RESTART: Restart,
    Attribute.ADDITIVE: Additive,
    Attribute.ACCUMULATE: Accumulate,
    Attribute.CALC_MODE: CalcMode,
}


def _parse_number_or_length(text: str) -> Integer | Float | Percentage | Length:
    """Read a unitless number, a percentage, or a number with a unit.

    :raises ValueError: if text is neither
    """
    if text.endswith("%"):
        return Percentage(float(parse_number(text[:-1]).value))
    try:
        return parse_number(text)
    except ValueError:
        return parse_length(text)


def parse_attribute_value(
    text: str, attribute: Attribute | None = None, *, strict: bool = False
) -> AttributeValue:
    """Read attribute text into a typed value.

    :param text: attribute text as found in an svg file
    :param attribute: optionally, the attribute the text belongs to. This selects
        the parser (paint for fill, path data for d, ...). Attributes without a
        dedicated parser are read as a number or a length.
    :param strict: raise instead of falling back to RawValue
    :return: typed value, or RawValue(text) if no typed value fits
    :raises ValueError: (strict only) if no typed value fits the text
    """
    if attribute in _KEYWORD_ATTRIBUTES:
        parser: Callable[[str], AttributeValue] = _KEYWORD_ATTRIBUTES[attribute]
    elif attribute in _PARSERS:
        parser = _PARSERS[attribute]
    else:
        parser = _parse_number_or_length
    try:
        return parser(text.strip())
    except ValueError:
        if strict:
            raise
        _LOGGER.debug("keeping %r as a raw value for %s", text, attribute)
        return RawValue(text)


def _parse_argument(text: str, attribute: Attribute | None) -> AttributeValue:
    """Read a str passed to Element.set or new_element.

    Text that fits no typed value is kept as a RawValue, but a malformed id or
    reference is an error here. A reader of existing files uses
    `parse_attribute_value` to keep those as RawValue instead.

    :raises InvalidCharacterError: if an id or reference has a disallowed character
    """
    try:
        return parse_attribute_value(text, attribute, strict=True)
    except InvalidCharacterError:
        raise
    except ValueError:
        return parse_attribute_value(text, attribute)


def to_attribute_value(
    value: AttributeArg, attribute: Attribute | None = None
) -> AttributeValue:
    """Convert a Python value into an attribute value.

    :param value: an attribute value, an Attribute (for attributeName), str, int,
        float, 4-tuple, or None
    :param attribute: optionally, the attribute the value is for. Used to read
        strings.
    :return: attribute value
    :raises TypeError: if value is a bool or any unsupported type
    :raises InvalidCharacterError: if a str id or reference has a disallowed
        character
    """
    if isinstance(value, (SvgValue, Keyword)):
        return value
    if isinstance(value, Attribute):
        return AttributeName(value)
    if isinstance(value, bool):
        msg = f"Cannot use bool {value} as an attribute value"
        raise TypeError(msg)
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, float):
        return Float(value)
    if isinstance(value, tuple) and len(value) == 4:
        return ViewBox(*value)
    if value is None:
        return parse_attribute_value("none", attribute)
    if isinstance(value, str):
        return _parse_argument(value, attribute)
    msg = f"Cannot use {type(value).__name__} {value!r} as an attribute value"
    raise TypeError(msg)
