"""An immutable svg element tree.

:created: 2026-10-18

Build an element with chained calls. Each call returns a new Element and leaves
the receiver as it was:

    >>> path = PathData().move_to((0, 0)).line_to((10, 0))
    >>> str(Element(TagName.PATH).set(Attribute.D, path))
    '<path d="M 0.00 0.00 L 10.00 0.00"/>'

An element has a tag, attributes in insertion order, child elements in append
order, and optional inner text. Elements compare and hash by all four. Attribute
order does not matter for either.
"""

from __future__ import annotations

import string
from types import MappingProxyType
from typing import TYPE_CHECKING

from svg_definitions.attributes import Attribute
from svg_definitions.exceptions import InvalidInnerTextError
from svg_definitions.string_conversion import tostring
from svg_definitions.tag_name import TagName
from svg_definitions.values.attribute_value import to_attribute_value

if TYPE_CHECKING:
    from collections.abc import Mapping

    from svg_definitions.values.attribute_value import AttributeArg, AttributeValue

_INNER_TEXT_CHARACTERS = frozenset(
    string.ascii_letters + string.digits + " '\"-_/\\.!?:;(){}[]`~&,"
)


def _as_tag(tag: TagName | str) -> TagName:
    if isinstance(tag, TagName):
        return tag
    return TagName.from_name(tag)


def _as_attribute(key: Attribute | str) -> Attribute:
    if isinstance(key, Attribute):
        return key
    return Attribute.from_name(key)


def find_invalid_inner_text_character(text: str) -> int | None:
    """Find the first character not allowed in inner text.

    :param text: candidate inner text
    :return: index of the first disallowed character or None if all are allowed
    """
    for index, char in enumerate(text):
        if char not in _INNER_TEXT_CHARACTERS:
            return index
    return None


class Element:
    """An svg element with attributes, children, and inner text."""

    __slots__ = ("_attributes", "_children", "_inner_text", "_tag")

    def __init__(self, tag: TagName | str) -> None:
        """Create an element with no attributes, children, or text.

        :param tag: a TagName or its svg name, e.g. "linearGradient"
        :raises TagNotFoundError: if tag is a str that names no svg element
        """
        self._tag = _as_tag(tag)
        self._attributes: dict[Attribute, AttributeValue] = {}
        self._children: tuple[Element, ...] = ()
        self._inner_text: str | None = None

    def _replace(
        self,
        attributes: dict[Attribute, AttributeValue] | None = None,
        children: tuple[Element, ...] | None = None,
        inner_text: str | None = None,
    ) -> Element:
        """Return a new Element with some parts replaced.

        The attribute dict is not copied, so pass a new one.
        """
        new = Element(self._tag)
        new._attributes = self._attributes if attributes is None else attributes
        new._children = self._children if children is None else children
        new._inner_text = self._inner_text if inner_text is None else inner_text
        return new

    # ===============================================================================
    #   Builder methods
    # ===============================================================================

    def set(self, key: Attribute | str, value: AttributeArg) -> Element:
        """Add or replace an attribute.

        :param key: an Attribute or its svg name, e.g. "stroke-width"
        :param value: an attribute value or anything `to_attribute_value` accepts.
            Strings are read with the parser for `key`.
        :return: new Element. A replaced attribute keeps its original position.
        :raises AttributeNotFoundError: if key is a str that names no attribute
        :raises TypeError: if value cannot be an attribute value
        """
        attribute = _as_attribute(key)
        attributes = dict(self._attributes)
        attributes[attribute] = to_attribute_value(value, attribute)
        return self._replace(attributes=attributes)

    def append(self, child: Element | TagName | str) -> Element:
        """Add a child after any existing children.

        :param child: an Element, or a tag for a new empty Element
        :return: new Element
        """
        if not isinstance(child, Element):
            child = Element(child)
        return self._replace(children=(*self._children, child))

    def set_inner(self, text: str) -> Element:
        """Set the text between the opening and closing tags.

        :param text: leading and trailing whitespace is removed. The remaining
            characters must be ascii letters, digits, spaces, or one of
            ' " - _ / \\ . ! ? : ; ( ) { } [ ] ` ~ & ,
        :return: new Element. Empty text removes any inner text.
        :raises InvalidInnerTextError: at the first character outside the set
        """
        text = text.strip()
        position = find_invalid_inner_text_character(text)
        if position is not None:
            raise InvalidInnerTextError(text, position)
        new = self._replace()
        new._inner_text = text or None
        return new

    # ===============================================================================
    #   Accessors
    # ===============================================================================

    @property
    def tag(self) -> TagName:
        return self._tag

    @property
    def attributes(self) -> Mapping[Attribute, AttributeValue]:
        """Read-only view of the attributes in insertion order."""
        return MappingProxyType(self._attributes)

    @property
    def children(self) -> tuple[Element, ...]:
        return self._children

    @property
    def inner_text(self) -> str | None:
        return self._inner_text

    def get(
        self, key: Attribute | str, default: AttributeValue | None = None
    ) -> AttributeValue | None:
        """Look up one attribute value.

        :param key: an Attribute or its svg name
        :param default: returned if the attribute is not set
        :return: the attribute value or default
        :raises AttributeNotFoundError: if key is a str that names no attribute
        """
        return self._attributes.get(_as_attribute(key), default)

    # ===============================================================================
    #   Copies, comparison, and text
    # ===============================================================================

    def clone(self) -> Element:
        """Return a deep copy. Every value and child is copied."""
        new = Element(self._tag)
        new._attributes = {k: v.clone() for k, v in self._attributes.items()}
        new._children = tuple(c.clone() for c in self._children)
        new._inner_text = self._inner_text
        return new

    def __copy__(self) -> Element:
        return self._replace(attributes=dict(self._attributes))

    def __deepcopy__(self, memo: dict[int, object]) -> Element:
        return self.clone()

    def __hash__(self) -> int:
        attributes = sorted(self._attributes.items(), key=lambda kv: kv[0].value)
        return hash((self._tag, tuple(attributes), self._children, self._inner_text))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return (
            self._tag is other._tag
            and self._attributes == other._attributes
            and self._children == other._children
            and self._inner_text == other._inner_text
        )

    def __str__(self) -> str:
        return tostring(self)

    def __repr__(self) -> str:
        return f"Element({str(self)!r})"

