"""Test functions in string_conversion.py.

:created: 2026-10-18
"""

# pyright: reportPrivateUsage=false

from lxml import etree

import svg_definitions.string_conversion as mod
from svg_definitions import Attribute, Element, PathData, TagName
from svg_definitions.nsmap import SVG_NAMESPACE, XLINK_NAMESPACE
from svg_definitions.values import new_reference


class TestFormatNumber:
    """Test format_number function."""

    def test_two_decimal_places(self):
        """Always write exactly two digits after the decimal point."""
        assert mod.format_number(1) == "1.00"
        assert mod.format_number(3.14159) == "3.14"
        assert mod.format_number(-1.5) == "-1.50"

    def test_negative_zero(self):
        """Remove "-" from "-0.00"."""
        assert mod.format_number(-0.001) == "0.00"
        assert mod.format_number(-0.0) == "0.00"

    def test_precision_argument(self):
        """Write any number of decimal places."""
        assert mod.format_number(1 / 3, 3) == "0.333"

    def test_same_string_every_time(self):
        """Formatting is stable for the same input."""
        for num in (0.1, 2 / 3, 1e6, -123.456):
            assert mod.format_number(num) == mod.format_number(num)
            assert len(mod.format_number(num).split(".")[1]) == 2


class TestFormatRatio:
    def test_four_decimal_places(self):
        """Ratios keep more precision than other numbers."""
        assert mod.format_ratio(0.1) == "0.1000"
        assert mod.format_ratio(1) == "1.0000"


class TestFormatNumbers:
    """Test format_numbers function."""

    def test_empty(self):
        """Return empty list."""
        assert mod.format_numbers([]) == []

    def test_explicit(self):
        """Return list of formatted strings."""
        assert mod.format_numbers([1, 2, 3]) == ["1.00", "2.00", "3.00"]


class TestToEtree:
    def test_tag_and_attributes(self):
        """Copy tag, attributes, and text into an lxml element."""
        elem = Element(TagName.TEXT).set(Attribute.X, 1).set_inner("hello")
        xml = mod.to_etree(elem)
        assert xml.tag == "text"
        assert xml.get("x") == "1"
        assert xml.text == "hello"

    def test_children_in_order(self):
        """Children keep append order."""
        group = Element(TagName.G).append(TagName.RECT).append(TagName.CIRCLE)
        xml = mod.to_etree(group)
        assert [x.tag for x in xml] == ["rect", "circle"]

    def test_nsmap_qualifies_tags(self):
        """With an nsmap, every tag is in the default namespace."""
        group = Element(TagName.G).append(TagName.RECT)
        xml = mod.to_etree(group, nsmap=mod.NSMAP)
        assert xml.tag == f"{{{SVG_NAMESPACE}}}g"
        assert xml[0].tag == f"{{{SVG_NAMESPACE}}}rect"

    def test_prefixed_attribute(self):
        """Qualify xlink:href in the xlink namespace."""
        use = Element(TagName.USE).set(Attribute.XLINK_HREF, new_reference("a"))
        xml = mod.to_etree(use, nsmap=mod.NSMAP)
        assert xml.get(str(etree.QName(XLINK_NAMESPACE, "href"))) == "#a"


class TestTostring:
    def test_self_closing(self):
        """An element without children or text closes itself."""
        path = PathData().move_to((0, 0)).line_to((1, 1))
        elem = Element(TagName.PATH).set(Attribute.D, path)
        assert mod.tostring(elem) == '<path d="M 0.00 0.00 L 1.00 1.00"/>'

    def test_escape_attribute_and_text(self):
        """Let lxml escape markup characters."""
        elem = Element(TagName.TEXT).set("font-family", "a&b")
        elem = elem.set_inner("Tom & Jerry")
        assert mod.tostring(elem) == (
            '<text font-family="a&amp;b">Tom &amp; Jerry</text>'
        )

    def test_nested(self):
        """Write children between opening and closing tags."""
        group = Element(TagName.G).append(Element(TagName.CIRCLE).set(Attribute.R, 2))
        assert mod.tostring(group) == '<g><circle r="2"/></g>'


class TestSvgTostring:
    def test_namespaced_and_pretty(self):
        """Declare the svg and xlink namespaces on the root."""
        assert mod.svg_tostring(Element(TagName.SVG)) == (
            b'<svg xmlns="http://www.w3.org/2000/svg" '
            + b'xmlns:xlink="http://www.w3.org/1999/xlink"/>\n'
        )

    def test_xml_declaration(self):
        """Add doctype and encoding with xml_declaration."""
        as_bytes = mod.svg_tostring(Element(TagName.SVG), xml_declaration=True)
        assert as_bytes.decode().splitlines() == [
            "<?xml version='1.0' encoding='UTF-8'?>",
            '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"',
            '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">',
            '<svg xmlns="http://www.w3.org/2000/svg" '
            + 'xmlns:xlink="http://www.w3.org/1999/xlink"/>',
        ]

    def test_override_defaults(self):
        """Explicit kwargs replace the defaults."""
        as_bytes = mod.svg_tostring(
            Element(TagName.SVG), xml_declaration=True, doctype=None
        )
        assert b"DOCTYPE" not in as_bytes
