"""SVG Element constructors. Create an svg element from keyword arguments.

:created: 2026-10-18

This is principally to allow passing values, rather than Attribute members, as
svg element parameters.

Will translate ``stroke_width=10`` to ``Attribute.STROKE_WIDTH: Integer(10)``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svg_definitions.element import Element

if TYPE_CHECKING:
    from svg_definitions.tag_name import TagName
    from svg_definitions.values.attribute_value import AttributeArg


def _fix_key(key: str) -> str:
    """Turn a Python keyword into an svg attribute name.

    :param key: keyword argument name
    :return: svg attribute name

    * replace '_' with '-' in keywords
    * remove trailing '_' from keywords
    * leave `namespace:name` keys (passed with ``**{"xlink:href": ...}``) alone

    SVG attribute names like `font-size` and `stroke-width` are not valid python
    keywords, but can be passed as `font_size` and `stroke_width`.

    Reserved Python keywords that are also valid and useful SVG attribute names (a
    popular one will be 'class') can be passed with a trailing underscore (e.g.,
    class_='body-text') to keep your code highlighter from getting confused.
    """
    if ":" in key:
        return key
    return key.rstrip("_").replace("_", "-")


def update_element(elem: Element, **attributes: AttributeArg) -> Element:
    """Create a copy of an Element with additional params.

    :param elem: an Element
    :param attributes: element attribute names and values. Knows what to do with a
        'text' keyword. text=None removes any inner text.
    :return: a new Element with updated attributes. ``elem`` is not changed.
    :raises AttributeNotFoundError: if a keyword names no svg attribute
    :raises InvalidInnerTextError: if ``text`` has characters not allowed in
        inner text

        >>> line = new_element('line', x1=0)
        >>> str(update_element(line, stroke_width=1))
        '<line x1="0" stroke-width="1"/>'
    """
    for key, val in attributes.items():
        if key == "text":
            elem = elem.set_inner("" if val is None else str(val))
            continue
        elem = elem.set(_fix_key(key), val)
    return elem


def new_element(tag: TagName | str, **attributes: AttributeArg) -> Element:
    """Create an Element, converting every kwarg value to an attribute value.

    :param tag: element tag
    :param attributes: element attribute names and values
    :returns: new ``tag`` element

        >>> str(new_element('line', x1=0, y1=0, x2=5, y2=5))
        '<line x1="0" y1="0" x2="5" y2="5"/>'

    Strips trailing underscores

        >>> str(new_element('feOffset', in_="SourceAlpha"))
        '<feOffset in="SourceAlpha"/>'

    Translates other underscores to hyphens

        >>> str(new_element('line', stroke_width=1))
        '<line stroke-width="1"/>'

    Special handling for a 'text' argument. Places value between element tags.

        >>> str(new_element('text', text='please star my project'))
        '<text>please star my project</text>'

    """
    return update_element(Element(tag), **attributes)
