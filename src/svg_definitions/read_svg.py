"""Read svg text or files into Element trees.

:created: 2026-10-18

Comments and processing instructions are dropped. Each attribute value is read
with the parser for its attribute (see `parse_attribute_value`), so reading what
`svg_tostring` wrote gives back an equal tree.

The parser is lenient by default:

* attributes that are not svg attributes are skipped with a warning
* elements in a namespace other than svg (e.g., Inkscape's sodipodi:namedview)
  are skipped with a warning
* attribute values no typed value fits are kept as RawValue

With ``strict=True`` each of these raises instead. An element in the svg
namespace with an unknown tag always raises TagNotFoundError.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import TYPE_CHECKING

from lxml import etree

from svg_definitions.attributes import Attribute
from svg_definitions.element import Element
from svg_definitions.exceptions import (
    AttributeNotFoundError,
    InvalidInnerTextError,
    NoElementError,
    TagNotFoundError,
)
from svg_definitions.nsmap import SVG_NAMESPACE, get_prefixed_name
from svg_definitions.tag_name import TagName
from svg_definitions.values.attribute_value import parse_attribute_value

if TYPE_CHECKING:
    import os

    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )


def _new_parser() -> etree.XMLParser:
    return etree.XMLParser(remove_comments=True, remove_pis=True)


def _collapse_whitespace(texts: list[str | None]) -> str:
    """Join text fragments and reduce every whitespace run to one space.

    :param texts: element text and child tails, any of which may be None
    :return: stripped text, empty if there is none
    """
    return " ".join(" ".join(t for t in texts if t).split())


def _read_attribute(elem: Element, key: str, val: str, *, strict: bool) -> Element:
    """Set one lxml attribute on an Element.

    :param elem: element to receive the attribute
    :param key: lxml attribute name, possibly namespace qualified
    :param val: attribute text
    :param strict: raise instead of skipping unknown attributes
    :return: new Element with the attribute, or elem if the attribute is skipped
    :raises AttributeNotFoundError: (strict only) for an unknown attribute
    """
    name = get_prefixed_name(key) or key
    try:
        attribute = Attribute.from_name(name)
    except AttributeNotFoundError:
        if strict:
            raise
        msg = f"Skipping unknown attribute {name!r} on <{elem.tag.value}>"
        warnings.warn(msg, stacklevel=2)
        return elem
    return elem.set(attribute, parse_attribute_value(val, attribute, strict=strict))


def _read_element(node: EtreeElement, *, strict: bool) -> Element | None:
    """Recursively convert an lxml element into an Element.

    :param node: lxml element
    :param strict: raise instead of skipping anything
    :return: Element or None if node is skipped
    :raises TagNotFoundError: if node is an svg element with an unknown tag or
        (strict only) is in a foreign namespace
    """
    qname = etree.QName(node)
    if qname.namespace not in (None, SVG_NAMESPACE):
        if strict:
            raise TagNotFoundError(qname.text)
        msg = f"Skipping element {qname.text!r} outside the svg namespace"
        warnings.warn(msg, stacklevel=2)
        return None

    elem = Element(TagName.from_name(qname.localname))
    for key, val in node.attrib.items():
        elem = _read_attribute(elem, str(key), str(val), strict=strict)

    texts: list[str | None] = [node.text]
    for child in node:
        texts.append(child.tail)
        child_elem = _read_element(child, strict=strict)
        if child_elem is not None:
            elem = elem.append(child_elem)

    text = _collapse_whitespace(texts)
    if not text:
        return elem
    try:
        return elem.set_inner(text)
    except InvalidInnerTextError:
        if strict:
            raise
        msg = f"Skipping inner text of <{elem.tag.value}>: {text!r}"
        warnings.warn(msg, stacklevel=2)
        return elem


def parse_text(xml: str | bytes, *, strict: bool = False) -> Element:
    """Read svg text into an Element tree.

    :param xml: svg document or fragment
    :param strict: raise instead of skipping unknown attributes, foreign
        elements, and unreadable values
    :return: the root Element
    :raises NoElementError: if xml is empty
    :raises lxml.etree.XMLSyntaxError: if xml is not well formed
    """
    if not xml.strip():
        raise NoElementError
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    root = etree.fromstring(xml, parser=_new_parser())
    elem = _read_element(root, strict=strict)
    if elem is None:
        msg = f"Root element {root.tag!r} is not an svg element"
        raise NoElementError(msg)
    return elem


def parse_file(path: str | os.PathLike[str], *, strict: bool = False) -> Element:
    """Read an svg file into an Element tree.

    :param path: path to an svg file
    :param strict: see `parse_text`
    :return: the root Element
    :raises OSError: if the file cannot be read
    """
    return parse_text(Path(path).read_bytes(), strict=strict)
