"""Test reading svg text and files.

:created: 2026-10-18
"""

import pytest
from conftest import TEST_RESOURCES
from lxml import etree

from svg_definitions import Attribute, Element, PathData, TagName, ViewBox
from svg_definitions.constructors import new_element
from svg_definitions.exceptions import (
    AttributeNotFoundError,
    InvalidInnerTextError,
    NoElementError,
    TagNotFoundError,
)
from svg_definitions.main import new_svg_root
from svg_definitions.read_svg import parse_file, parse_text
from svg_definitions.string_conversion import svg_tostring
from svg_definitions.values import (
    AttributeName,
    CalcMode,
    Duration,
    FillRule,
    Float,
    Identifier,
    Indefinite,
    Integer,
    KeySplines,
    Length,
    LengthUnit,
    PaintServer,
    Percentage,
    Ratio,
    RawValue,
    TransformList,
    Units,
    UrlReference,
    ValueList,
    hex_color,
    hsl,
    hsla,
    new_reference,
    rgb,
    rgba,
)

_SVG = 'xmlns="http://www.w3.org/2000/svg"'


class TestParseText:
    def test_simple(self):
        """Read attribute values with the parser for each attribute."""
        elem = parse_text(
            f'<svg {_SVG} viewBox="0 0 10 10">'
            + '<circle cx="5" cy="5" r="2.5" fill="#f00"/></svg>'
        )
        expect = new_svg_root(0, 0, 10, 10).append(
            new_element("circle", cx=5, cy=5, r=2.5, fill="#f00")
        )
        assert elem == expect

    def test_no_namespace(self):
        elem = parse_text('<svg><circle r="1"/></svg>')
        assert elem.children[0].get(Attribute.R) == Integer(1)

    def test_round_trip(self):
        """Read back an equal tree from svg_tostring output."""
        triangle = PathData().move_to((0, 0)).line_to((10, 0)).line_to((0, 10))
        tree = (
            new_svg_root(0, 0, 20, 20, width="20px")
            .append(
                new_element(
                    "path",
                    id="tri",
                    d=triangle.close_path(),
                    fill=PaintServer(Identifier("grad")),
                    stroke=None,
                    stroke_width=1.5,
                    opacity=Ratio(0.5),
                    transform=TransformList().translate(1, 2),
                )
            )
            .append(new_element("use", **{"xlink:href": "#tri"}))
            .append(new_element("text", x=5, text="hello world"))
        )
        assert parse_text(svg_tostring(tree)) == tree
        assert parse_text(svg_tostring(tree, xml_declaration=True)) == tree

    def test_round_trip_every_value_kind(self):
        """Read back an equal tree holding one of each kind of attribute value."""
        path = PathData().move_to((0, 0)).arc_to((5, 5), (2, 2), 0, True, False)
        shapes = (
            Element(TagName.PATH)
            .set(Attribute.ID, Identifier("shape"))
            .set(Attribute.D, path.close_path())
            .set(Attribute.FILL, rgb(1, 2, 3))
            .set(Attribute.STROKE, rgba(1, 2, 3, 0.5))
            .set(Attribute.COLOR, hex_color("#fa0"))
            .set(Attribute.FILL_RULE, FillRule.EVENODD)
            .set(Attribute.OPACITY, Ratio(0.25))
            .set(Attribute.CLIP_PATH, UrlReference(Identifier("clip")))
            .set(Attribute.TRANSFORM, TransformList().rotate(45, (1, 1)))
            .set(Attribute.STROKE_WIDTH, Length(LengthUnit.MM, 0.5))
            .set(Attribute.FONT_FAMILY, RawValue("serif"))
        )
        animate = (
            Element(TagName.ANIMATE)
            .set(Attribute.ATTRIBUTE_NAME, AttributeName(Attribute.OPACITY))
            .set(Attribute.VALUES, ValueList(("0", "1", "0")))
            .set(Attribute.DUR, Duration(2))
            .set(Attribute.REPEAT_COUNT, Indefinite.INDEFINITE)
            .set(Attribute.CALC_MODE, CalcMode.SPLINE)
            .set(Attribute.KEY_SPLINES, KeySplines(((0.5, 0, 0.5, 1),) * 2))
        )
        stops = (
            Element(TagName.STOP)
            .set(Attribute.OFFSET, Percentage(50))
            .set(Attribute.STOP_COLOR, hsl(120, 50, 50)),
            Element(TagName.STOP)
            .set(Attribute.OFFSET, Length.from_percentage(100))
            .set(Attribute.FLOOD_COLOR, hsla(120, 50, 50, 0.5)),
        )
        tree = (
            new_svg_root(0, 0, 10, 10)
            .append(shapes.append(animate))
            .append(Element(TagName.USE).set(Attribute.HREF, new_reference("shape")))
            .append(
                Element(TagName.RECT)
                .set(Attribute.X, Integer(1))
                .set(Attribute.Y, Float(2.5))
                .set(Attribute.FILL, PaintServer(Identifier("grad"), rgb(0, 0, 0)))
            )
            .append(Element(TagName.LINEAR_GRADIENT).append(stops[0]).append(stops[1]))
            .append(Element(TagName.TEXT).set_inner(""))
        )
        assert parse_text(svg_tostring(tree)) == tree

    def test_collapse_whitespace(self):
        """Join element text and child tails with single spaces."""
        elem = parse_text("<text>\n  a\n  <tspan>b</tspan>   c  </text>")
        assert elem.inner_text == "a c"
        assert elem.children[0].inner_text == "b"

    def test_blank_text_ignored(self):
        elem = parse_text("<g>\n  <rect/>\n</g>")
        assert elem.inner_text is None

    def test_comments_removed(self):
        elem = parse_text("<g><!-- note --><rect/><?pi data?></g>")
        assert elem == Element(TagName.G).append(TagName.RECT)

    def test_case_insensitive_tag(self):
        elem = parse_text("<svg><LinearGradient/></svg>")
        assert elem.children[0].tag is TagName.LINEAR_GRADIENT

    def test_raw_value(self):
        """Keep values no typed value fits."""
        elem = parse_text('<text font-family="serif"/>')
        assert elem.get(Attribute.FONT_FAMILY) == RawValue("serif")


class TestLenient:
    def test_unknown_attribute(self):
        """Skip unknown attributes with a warning."""
        with pytest.warns(UserWarning, match="strokeWidth"):
            elem = parse_text('<rect strokeWidth="1" x="1"/>')
        assert dict(elem.attributes) == {Attribute.X: Integer(1)}

    def test_invalid_inner_text(self):
        with pytest.warns(UserWarning):
            elem = parse_text("<text>50% off</text>")
        assert elem.inner_text is None

    def test_foreign_elements(self):
        """Skip Inkscape elements and attributes."""
        with pytest.warns(UserWarning):
            elem = parse_file(TEST_RESOURCES / "inkscape_extras.svg")
        assert dict(elem.attributes) == {Attribute.VIEW_BOX: ViewBox(0, 0, 10, 10)}
        assert len(elem.children) == 1
        path = elem.children[0]
        assert dict(path.attributes) == {
            Attribute.D: PathData.from_svgd("M 0 0 l 10 0 Z")
        }


class TestStrict:
    def test_unknown_attribute(self):
        with pytest.raises(AttributeNotFoundError):
            _ = parse_text('<rect strokeWidth="1"/>', strict=True)

    def test_foreign_element(self):
        with pytest.raises(TagNotFoundError):
            _ = parse_text(
                f'<svg {_SVG} xmlns:s="http://example.com/s"><s:thing/></svg>',
                strict=True,
            )

    def test_raw_value(self):
        with pytest.raises(ValueError):
            _ = parse_text('<text font-family="serif"/>', strict=True)

    def test_invalid_inner_text(self):
        with pytest.raises(InvalidInnerTextError):
            _ = parse_text("<text>50% off</text>", strict=True)

    def test_inkscape_file(self):
        with pytest.raises(AttributeNotFoundError):
            _ = parse_file(TEST_RESOURCES / "inkscape_extras.svg", strict=True)


class TestErrors:
    def test_unknown_svg_tag(self):
        """Unknown tags in the svg namespace always raise."""
        with pytest.raises(TagNotFoundError):
            _ = parse_text(f"<svg {_SVG}><blink/></svg>")

    @pytest.mark.parametrize("xml", ["", "   \n", b""])
    def test_empty(self, xml: str | bytes):
        with pytest.raises(NoElementError):
            _ = parse_text(xml)

    def test_malformed(self):
        with pytest.raises(etree.XMLSyntaxError):
            _ = parse_text("<svg>")

    def test_missing_file(self):
        with pytest.raises(OSError):
            _ = parse_file(TEST_RESOURCES / "does_not_exist.svg")


class TestParseFile:
    @pytest.fixture()
    def square(self) -> Element:
        return parse_file(TEST_RESOURCES / "gradient_square.svg")

    def test_root(self, square: Element):
        assert square.tag is TagName.SVG
        assert square.get(Attribute.VIEW_BOX) == ViewBox(0, 0, 100, 100)
        assert [x.tag for x in square.children] == [
            TagName.DEFS,
            TagName.RECT,
            TagName.USE,
            TagName.TEXT,
        ]
        assert square.inner_text is None

    def test_gradient(self, square: Element):
        gradient = square.children[0].children[0]
        assert gradient.get(Attribute.GRADIENT_UNITS) is Units.USER_SPACE_ON_USE
        assert str(gradient.get(Attribute.GRADIENT_TRANSFORM)) == (
            "rotate(45.00 50.00 50.00)"
        )
        stop0, stop1 = gradient.children
        assert stop0.get(Attribute.OFFSET) == Integer(0)
        assert stop0.get(Attribute.STOP_COLOR) == hex_color("#ff0000")
        assert stop1.get(Attribute.STOP_COLOR) == rgb(0, 0, 255)
        assert stop1.get(Attribute.STOP_OPACITY) == Ratio(0.5)

    def test_shapes(self, square: Element):
        _, rect, use, text = square.children
        assert rect.get(Attribute.FILL) == PaintServer(Identifier("fade"))
        assert rect.get(Attribute.WIDTH) == Integer(80)
        assert use.get(Attribute.XLINK_HREF) == new_reference("square")
        assert str(use.get(Attribute.TRANSFORM)) == "translate(5.00 5.00)"
        assert text.inner_text == "a fading square"

    def test_file_round_trip(self, square: Element):
        assert parse_text(svg_tostring(square)) == square
