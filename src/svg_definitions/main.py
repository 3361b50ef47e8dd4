"""Create svg root elements and write svg files.

:created: 2026-10-18

Element trees are written through lxml. The root is declared in the svg namespace
(with the xlink prefix available), so the file opens in a browser or Inkscape as
is.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING, TypeGuard

from svg_definitions.attributes import Attribute
from svg_definitions.constructors import update_element
from svg_definitions.element import Element
from svg_definitions.string_conversion import svg_tostring
from svg_definitions.tag_name import TagName
from svg_definitions.values.viewbox import ViewBox

if TYPE_CHECKING:
    from svg_definitions.values.attribute_value import AttributeArg


def _is_io_bytes(obj: object) -> TypeGuard[IO[bytes]]:
    """Determine if an object is file-like.

    :param obj: object
    :return: True if object is file-like
    """
    return hasattr(obj, "read") and hasattr(obj, "write")


def new_svg_root(
    x_: int | None = None,
    y_: int | None = None,
    width_: int | None = None,
    height_: int | None = None,
    *,
    pad_: int | tuple[int, int, int, int] = 0,
    **attributes: AttributeArg,
) -> Element:
    """Create an svg root element from viewBox style parameters.

    :param x_: x value in upper-left corner
    :param y_: y value in upper-left corner
    :param width_: width of viewBox
    :param height_: height of viewBox
    :param pad_: optionally increase viewBox by pad in all directions. Accepts a
        single value or a tuple of values applied to top, right, bottom, left.
    :param attributes: element attribute names and values
    :return: root svg element

    All viewBox-style (trailing underscore) parameters are optional. If all four
    are given, a viewBox attribute is set. Any kwargs will be set as element
    attributes with ``update_element``. A ``viewBox`` kwarg supercedes the
    inferred viewBox.
    """
    svg_root = Element(TagName.SVG)
    if x_ is not None and y_ is not None and width_ is not None and height_ is not None:
        viewbox = ViewBox(x_, y_, width_, height_).padded(pad_)
        svg_root = svg_root.set(Attribute.VIEW_BOX, viewbox)
    return update_element(svg_root, **attributes)


def write_svg(
    svg: str | Path | IO[bytes],
    root: Element,
    **tostring_kwargs: str | bool,
) -> str:
    r"""Write an Element tree as an svg file.

    :param svg: open binary file object or path to output file (include extension .svg)
    :param root: root node of your svg geometry
    :param tostring_kwargs: keyword arguments to etree.tostring. xml_declaration=True
        for sensible default values. See below.
    :return: svg filename
    :effects: creates svg file at ``svg``
    :raises TypeError: if ``svg`` is not a Path, str, or binary file object

    It's often useful to write a temporary svg file, so a tempfile.NamedTemporaryFile
    object (or any open binary file object can be passed instead of an svg filename).

    If you pass ``xml_declaration=True`` as a tostring_kwarg, this function will
    attempt to pass the following defaults to ``lxml.etree.tostring``:

    * doctype: str = (
        '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"\n'
        '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">'
    )
    * encoding = "UTF-8"

    Always, this function will default to ``pretty_print=True``

    These can be overridden by tostring_kwargs.

    e.g., ``write_svg(..., xml_declaration=True, doctype=None``)
    e.g., ``write_svg(..., xml_declaration=True, encoding='ascii')``
    """
    svg_contents = svg_tostring(root, **tostring_kwargs)

    if _is_io_bytes(svg):
        _ = svg.write(svg_contents)
        return svg.name
    if isinstance(svg, (str, Path)):
        with Path(svg).open("wb") as svg_file:
            _ = svg_file.write(svg_contents)
        return str(svg)
    msg = f"svg must be a path-like object or a file-like object, not {type(svg)}"
    raise TypeError(msg)
