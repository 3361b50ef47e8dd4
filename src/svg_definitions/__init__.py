"""Import functions into the package namespace.

:created: 2026-10-18
"""

from svg_definitions.attributes import Attribute
from svg_definitions.constructors.new_element import new_element, update_element
from svg_definitions.element import Element
from svg_definitions.exceptions import (
    AttributeNotFoundError,
    InvalidCharacterError,
    InvalidColorFormatError,
    InvalidInnerTextError,
    InvalidPathDataError,
    NoElementError,
    TagNotFoundError,
)
from svg_definitions.main import new_svg_root, write_svg
from svg_definitions.nsmap import NSMAP, new_qname
from svg_definitions.read_svg import parse_file, parse_text
from svg_definitions.string_conversion import (
    format_number,
    format_numbers,
    format_ratio,
    svg_tostring,
    to_etree,
    tostring,
)
from svg_definitions.tag_name import TagName
from svg_definitions.values import (
    Color,
    Identifier,
    Length,
    LengthUnit,
    PaintServer,
    PathData,
    Reference,
    TransformList,
    ViewBox,
    new_id,
    new_reference,
    parse_attribute_value,
    to_attribute_value,
)

__all__ = [
    "NSMAP",
    "Attribute",
    "AttributeNotFoundError",
    "Color",
    "Element",
    "Identifier",
    "InvalidCharacterError",
    "InvalidColorFormatError",
    "InvalidInnerTextError",
    "InvalidPathDataError",
    "Length",
    "LengthUnit",
    "NoElementError",
    "PaintServer",
    "PathData",
    "Reference",
    "TagName",
    "TagNotFoundError",
    "TransformList",
    "ViewBox",
    "format_number",
    "format_numbers",
    "format_ratio",
    "new_element",
    "new_id",
    "new_qname",
    "new_reference",
    "new_svg_root",
    "parse_attribute_value",
    "parse_file",
    "parse_text",
    "svg_tostring",
    "to_attribute_value",
    "to_etree",
    "tostring",
    "update_element",
    "write_svg",
]
