"""Import attribute value types into the values namespace.

:created: 2026-10-18
"""

from svg_definitions.values.animation import (
    AttributeName,
    ClockUnit,
    Count,
    Duration,
    Indefinite,
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
from svg_definitions.values.attribute_value import (
    AttributeArg,
    AttributeValue,
    new_color,
    new_float,
    new_id,
    new_integer,
    new_length,
    new_path_definition,
    new_percentage,
    new_viewbox,
    parse_attribute_value,
    to_attribute_value,
)
from svg_definitions.values.base import RawValue, SvgValue
from svg_definitions.values.color import (
    HSL,
    HSLA,
    RGB,
    RGBA,
    Color,
    HexColor,
    hex_color,
    hsl,
    hsla,
    parse_color,
    rgb,
    rgba,
)
from svg_definitions.values.identifier import (
    Identifier,
    Reference,
    UrlReference,
    new_reference,
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
    PaintKeyword,
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
from svg_definitions.values.paint import Paint, PaintServer, parse_paint
from svg_definitions.values.path_data import PathData
from svg_definitions.values.transform import TransformList
from svg_definitions.values.viewbox import ViewBox, parse_viewbox

__all__ = [
    "HSL",
    "HSLA",
    "RGB",
    "RGBA",
    "Accumulate",
    "Additive",
    "AttributeArg",
    "AttributeName",
    "AttributeValue",
    "CalcMode",
    "ClockUnit",
    "Color",
    "Count",
    "Duration",
    "FillRule",
    "Float",
    "HexColor",
    "Identifier",
    "Indefinite",
    "Integer",
    "KeySplines",
    "Keyword",
    "Length",
    "LengthUnit",
    "MotionRotate",
    "NoneKeyword",
    "Paint",
    "PaintKeyword",
    "PaintServer",
    "PathData",
    "Percentage",
    "Ratio",
    "RawValue",
    "Reference",
    "Restart",
    "SpreadMethod",
    "StrokeLinecap",
    "StrokeLinejoin",
    "SvgValue",
    "TextAnchor",
    "TransformList",
    "Units",
    "UrlReference",
    "ValueList",
    "ViewBox",
    "Visibility",
    "hex_color",
    "hsl",
    "hsla",
    "new_color",
    "new_float",
    "new_id",
    "new_integer",
    "new_length",
    "new_path_definition",
    "new_percentage",
    "new_reference",
    "new_viewbox",
    "parse_attribute_name",
    "parse_attribute_value",
    "parse_color",
    "parse_count",
    "parse_duration",
    "parse_key_splines",
    "parse_length",
    "parse_motion_rotate",
    "parse_number",
    "parse_paint",
    "parse_ratio",
    "parse_reference",
    "parse_url_reference",
    "parse_value_list",
    "parse_viewbox",
    "rgb",
    "rgba",
    "to_attribute_value",
]
