"""Quasi-private functions for high-level string conversion.

:created: 2026-10-18

Every number written by svg_definitions goes through `format_number`:
* fixed point with exactly two digits after the decimal
* no "-0.00"

Hashes of attribute values are taken over these strings, so two values that
print the same are the same value.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, cast

from lxml import etree

from svg_definitions.nsmap import NSMAP, new_qname

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from svg_definitions.element import Element

# digits after the decimal point for numbers and for ratios (alpha, opacity)
_PRECISION = 2
_RATIO_PRECISION = 4


def format_number(num: float, precision: int = _PRECISION) -> str:
    """Format a number into an svg-readable fixed-point string.

    :param num: number to format
    :param precision: number of digits after the decimal point, defaults to 2
    :return: string representation of the number with exactly `precision` digits
        after the decimal point. Negative values that round to zero lose their
        sign.
    """
    as_str = f"{num:.{precision}f}"
    if as_str.startswith("-") and float(as_str) == 0:
        return as_str[1:]
    return as_str


def format_ratio(num: float) -> str:
    """Format a ratio (alpha, opacity) with four digits after the decimal point.

    :param num: number to format
    :return: fixed-point string, e.g. "0.1000"
    """
    return format_number(num, _RATIO_PRECISION)


def format_numbers(nums: Iterable[float]) -> list[str]:
    """Format multiple numbers to fixed precision.

    :param nums: iterable of floats
    :return: list of formatted strings
    """
    return [format_number(num) for num in nums]


def _build_etree(
    elem: Element, parent: EtreeElement | None, nsmap: dict[str | None, str] | None
) -> EtreeElement:
    """Recursively create lxml elements for an Element and its descendants.

    :param elem: element to convert
    :param parent: lxml parent, None for the root
    :param nsmap: namespace map. If given, every tag is put in the default namespace
        and the map is declared on the root.
    :return: the new lxml element
    """
    tag = elem.tag.value
    if nsmap is not None:
        tag = f"{{{nsmap[None]}}}{tag}"
    if parent is None:
        etree_elem = etree.Element(tag, nsmap=nsmap)
    else:
        etree_elem = etree.SubElement(parent, tag)
    for key, val in elem.attributes.items():
        etree_elem.set(new_qname(key.value), str(val))
    if elem.inner_text is not None:
        etree_elem.text = elem.inner_text
    for child in elem.children:
        _ = _build_etree(child, etree_elem, nsmap)
    return etree_elem


def to_etree(
    elem: Element, nsmap: dict[str | None, str] | None = None
) -> EtreeElement:
    """Convert an Element tree into an lxml element tree.

    :param elem: root of the tree to convert
    :param nsmap: optional namespace map with a default (None) namespace
    :return: a new lxml element. Attribute values are their canonical strings.
        lxml takes care of escaping.
    """
    return _build_etree(elem, None, nsmap)


def tostring(elem: Element) -> str:
    """Compact svg text for an element without namespace declarations.

    :param elem: element to serialize
    :return: e.g. '<path d="M 0.00 0.00 L 1.00 1.00"/>'
    """
    return cast("str", etree.tostring(to_etree(elem), encoding="unicode"))


class _TostringDefaults(Enum):
    """Default values for an svg xml_header."""

    DOCTYPE = (
        '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"\n'
        + '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">'
    )
    ENCODING = "UTF-8"


def svg_tostring(elem: Element, **tostring_kwargs: str | bool | None) -> bytes:
    """Contents of svg file with optional xml declaration.

    :param elem: root node of your svg geometry
    :param tostring_kwargs: keyword arguments to etree.tostring.
        pass xml_declaration=True for sensible defaults, see further documentation
        on xml header in write_svg docstring.
    :return: bytestring of svg file contents

    The root is declared in the svg namespace (with xlink available), so the
    output is a standalone svg document.
    """
    tostring_kwargs["pretty_print"] = tostring_kwargs.get("pretty_print", True)
    if tostring_kwargs.get("xml_declaration"):
        for default in _TostringDefaults:
            arg_name = default.name.lower()
            value = tostring_kwargs.get(arg_name, default.value)
            tostring_kwargs[arg_name] = value
    xml = to_etree(elem, nsmap=NSMAP)
    as_bytes = etree.tostring(etree.ElementTree(xml), **tostring_kwargs)  # type: ignore
    return cast("bytes", as_bytes)
