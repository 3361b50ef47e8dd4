"""Build svg path data ("d" attribute) strings with chained drawing commands.

:created: 2026-10-18

Every drawing method returns a new PathData with one more command appended. The
receiver is never changed, so a partial path can be shared and extended in
different directions.

    >>> str(PathData().move_to((0, 0)).line_to((10, 0)).close_path())
    'M 0.00 0.00 L 10.00 0.00 Z'

Numbers are always written with two digits after the decimal point. Arc flags are
written as 0 or 1. Nothing here checks that a path makes geometric sense (a path
may start with a line_to). PathData is a string formatter, not a validator.

Commands and argument order follow the MDN path tutorial
https://developer.mozilla.org/en-US/docs/Web/SVG/Tutorial/Paths
with one exception: for the curve commands, the end point comes first, then the
control points.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, TypeAlias

from svg_path_data.string_ops import svgd_split

from svg_definitions.exceptions import InvalidPathDataError
from svg_definitions.string_conversion import format_number
from svg_definitions.values.base import SvgValue
from svg_definitions.values.numbers import NUMBER

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

Point: TypeAlias = tuple[float, float]


def _point(point: Point) -> str:
    """Format a point as "x y".

    :param point: (x, y)
    :return: two formatted numbers separated by a space
    """
    x, y = point
    return f"{format_number(x)} {format_number(y)}"


def _flag(flag: bool) -> str:
    return "1" if flag else "0"


class PathData(SvgValue):
    """An append-only svg path data string."""

    __slots__ = ("_commands",)

    def __init__(self, commands: str = "") -> None:
        """Create an empty path. The argument is for internal use.

        :param commands: previously accumulated commands, each with a leading space
        """
        self._commands = commands

    def __str__(self) -> str:
        return self._commands.removeprefix(" ")

    def __repr__(self) -> str:
        return f"PathData({str(self)!r})"

    def _push(self, command: str, args: str = "") -> PathData:
        """Return a new PathData with one more command.

        :param command: the command letter
        :param args: formatted arguments
        :return: new PathData
        """
        token = f" {command} {args}" if args else f" {command}"
        return PathData(self._commands + token)

    def is_str(self, expected: str) -> bool:
        """Compare the rendered path to a string.

        :param expected: e.g. "M 3.00 3.00 L 6.00 6.00 Z"
        :return: True if str(self) == expected
        """
        return str(self) == expected

    # ===============================================================================
    #   Move and line commands
    # ===============================================================================

    def move_to(self, point: Point) -> PathData:
        """Move to point without drawing: `M x y`."""
        return self._push("M", _point(point))

    def r_move_to(self, delta: Point) -> PathData:
        """Move by (dx, dy) without drawing: `m dx dy`."""
        return self._push("m", _point(delta))

    def line_to(self, point: Point) -> PathData:
        """Draw a line to point: `L x y`."""
        return self._push("L", _point(point))

    def r_line_to(self, delta: Point) -> PathData:
        """Draw a line by (dx, dy): `l dx dy`."""
        return self._push("l", _point(delta))

    def horizontal_line_to(self, x: float) -> PathData:
        """Draw a horizontal line to x: `H x`."""
        return self._push("H", format_number(x))

    def r_horizontal_line_to(self, dx: float) -> PathData:
        """Draw a horizontal line by dx: `h dx`."""
        return self._push("h", format_number(dx))

    def vertical_line_to(self, y: float) -> PathData:
        """Draw a vertical line to y: `V y`."""
        return self._push("V", format_number(y))

    def r_vertical_line_to(self, dy: float) -> PathData:
        """Draw a vertical line by dy: `v dy`."""
        return self._push("v", format_number(dy))

    # ===============================================================================
    #   Bezier curves
    # ===============================================================================

    def curve_to(self, point: Point, control1: Point, control2: Point) -> PathData:
        """Draw a cubic Bezier to point.

        :param point: end point
        :param control1: control point at the start of the curve
        :param control2: control point at the end of the curve
        :return: new PathData ending in `C c1x c1y, c2x c2y, x y`
        """
        args = f"{_point(control1)}, {_point(control2)}, {_point(point)}"
        return self._push("C", args)

    def r_curve_to(self, delta: Point, control1: Point, control2: Point) -> PathData:
        """Draw a cubic Bezier with every point relative to the current point.

        :return: new PathData ending in `c c1dx c1dy, c2dx c2dy, dx dy`
        """
        args = f"{_point(control1)}, {_point(control2)}, {_point(delta)}"
        return self._push("c", args)

    def smooth_curve_to(self, point: Point, control2: Point) -> PathData:
        """Continue a cubic Bezier. The first control point is a reflection.

        :param point: end point
        :param control2: control point at the end of the curve
        :return: new PathData ending in `S c2x c2y, x y`
        """
        return self._push("S", f"{_point(control2)}, {_point(point)}")

    def r_smooth_curve_to(self, delta: Point, control2: Point) -> PathData:
        """Relative `smooth_curve_to`: `s c2dx c2dy, dx dy`."""
        return self._push("s", f"{_point(control2)}, {_point(delta)}")

    def quad_curve_to(self, point: Point, control: Point) -> PathData:
        """Draw a quadratic Bezier to point: `Q cx cy, x y`."""
        return self._push("Q", f"{_point(control)}, {_point(point)}")

    def r_quad_curve_to(self, delta: Point, control: Point) -> PathData:
        """Relative `quad_curve_to`: `q cdx cdy, dx dy`."""
        return self._push("q", f"{_point(control)}, {_point(delta)}")

    def quad_string_to(self, point: Point) -> PathData:
        """Continue a quadratic Bezier with a reflected control point: `T x y`."""
        return self._push("T", _point(point))

    def r_quad_string_to(self, delta: Point) -> PathData:
        """Relative `quad_string_to`: `t dx dy`."""
        return self._push("t", _point(delta))

    # ===============================================================================
    #   Arcs and closing
    # ===============================================================================

    def arc_to(
        self,
        point: Point,
        radii: Point,
        x_axis_rotation: float,
        large_arc: bool,
        sweep: bool,
    ) -> PathData:
        """Draw an elliptical arc to point.

        :param point: end point
        :param radii: (rx, ry)
        :param x_axis_rotation: rotation of the ellipse in degrees
        :param large_arc: take the larger of the two possible arcs
        :param sweep: draw the arc in the positive-angle direction
        :return: new PathData ending in `A rx ry rotation large sweep x y`
        """
        args = " ".join(
            (
                _point(radii),
                format_number(x_axis_rotation),
                _flag(large_arc),
                _flag(sweep),
                _point(point),
            )
        )
        return self._push("A", args)

    def r_arc_to(
        self,
        delta: Point,
        radii: Point,
        x_axis_rotation: float,
        large_arc: bool,
        sweep: bool,
    ) -> PathData:
        """Relative `arc_to`: `a rx ry rotation large sweep dx dy`."""
        args = " ".join(
            (
                _point(radii),
                format_number(x_axis_rotation),
                _flag(large_arc),
                _flag(sweep),
                _point(delta),
            )
        )
        return self._push("a", args)

    def close_path(self) -> PathData:
        """Draw a line back to the start of the current subpath: `Z`."""
        return self._push("Z")

    @classmethod
    def from_svgd(cls, svgd: str) -> PathData:
        """Read any svg path data string into a canonical PathData.

        :param svgd: path data as found in an svg file, e.g. "M0,0l10-5z"
        :return: PathData that draws the same commands, e.g.
            "M 0.00 0.00 l 10.00 -5.00 Z"
        :raises InvalidPathDataError: if svgd does not follow the path grammar

        Implicit repeated commands are written out (`M0 0 1 1` is a move_to then a
        line_to). Closing commands are always written as `Z`.
        """
        path = cls()
        for command, args in _iter_commands(svgd):
            path = _REPLAY[command](path, args)
        return path


# ===================================================================================
#   Read path data strings
# ===================================================================================


_COMMANDS = "MmLlHhVvCcSsQqTtAaZz"
_ARC_SEGMENT = re.compile(rf"([Aa])([^{_COMMANDS}]*)")
_NUMBER_RE = re.compile(NUMBER)
_SEPARATORS = " \t\r\n,"

# number of arguments for each command
# fmt: off
_N_ARGS = {
    "M": 2, "L": 2, "H": 1, "V": 1, "C": 6,
    "S": 4, "Q": 4, "T": 2, "A": 7, "Z": 0,
}
# fmt: on


def _unpack_arc_flags(match: re.Match[str]) -> str:
    """Separate arc flags written without whitespace, e.g. "A5 5 0 016 6".

    :param match: an arc command letter and everything up to the next command
    :return: the arc command with every argument separated by a space. An arc
        body with anything besides numbers and separators is returned unchanged.
    """
    command, body = match.groups()
    if _NUMBER_RE.sub("", body).strip(_SEPARATORS):
        return match.group()
    tokens = _NUMBER_RE.findall(body)
    args: list[str] = []
    while tokens:
        token = tokens.pop(0)
        is_flag = len(args) % 7 in (3, 4)
        if is_flag and len(token) > 1 and token[0] in "01" and token[1].isdigit():
            tokens.insert(0, token[1:])
            token = token[0]
        args.append(token)
    return f"{command}{' '.join(args)} "


def _iter_commands(svgd: str) -> Iterator[tuple[str, list[float]]]:
    """Yield each command letter with its arguments.

    :param svgd: path data string
    :yield: (command letter, arguments)
    :raises InvalidPathDataError: if svgd does not follow the path grammar
    """
    try:
        parts = svgd_split(_ARC_SEGMENT.sub(_unpack_arc_flags, svgd))
    except ValueError as e:
        raise InvalidPathDataError(svgd, str(e)) from e
    at_part = 0
    while at_part < len(parts):
        command = parts[at_part]
        n_args = _N_ARGS[command.upper()]
        at_part += 1
        if n_args == 0:
            yield command, []
            continue
        while at_part < len(parts) and parts[at_part] not in _COMMANDS:
            args = [float(x) for x in parts[at_part : at_part + n_args]]
            at_part += n_args
            if command in "Aa" and not {args[3], args[4]} <= {0, 1}:
                msg = f"arc flags must be 0 or 1, not {args[3]} and {args[4]}"
                raise InvalidPathDataError(svgd, msg)
            yield command, args
            # coordinate pairs after a move are implicit lines
            command = {"M": "L", "m": "l"}.get(command, command)


def _arc_args(a: list[float]) -> tuple[Point, Point, float, bool, bool]:
    """Reorder arc arguments from path-data order to arc_to order."""
    return (a[5], a[6]), (a[0], a[1]), a[2], a[3] == 1, a[4] == 1


_REPLAY: dict[str, Callable[[PathData, list[float]], PathData]] = {
    "M": lambda p, a: p.move_to((a[0], a[1])),
    "m": lambda p, a: p.r_move_to((a[0], a[1])),
    "L": lambda p, a: p.line_to((a[0], a[1])),
    "l": lambda p, a: p.r_line_to((a[0], a[1])),
    "H": lambda p, a: p.horizontal_line_to(a[0]),
    "h": lambda p, a: p.r_horizontal_line_to(a[0]),
    "V": lambda p, a: p.vertical_line_to(a[0]),
    "v": lambda p, a: p.r_vertical_line_to(a[0]),
    "C": lambda p, a: p.curve_to((a[4], a[5]), (a[0], a[1]), (a[2], a[3])),
    "c": lambda p, a: p.r_curve_to((a[4], a[5]), (a[0], a[1]), (a[2], a[3])),
    "S": lambda p, a: p.smooth_curve_to((a[2], a[3]), (a[0], a[1])),
    "s": lambda p, a: p.r_smooth_curve_to((a[2], a[3]), (a[0], a[1])),
    "Q": lambda p, a: p.quad_curve_to((a[2], a[3]), (a[0], a[1])),
    "q": lambda p, a: p.r_quad_curve_to((a[2], a[3]), (a[0], a[1])),
    "T": lambda p, a: p.quad_string_to((a[0], a[1])),
    "t": lambda p, a: p.r_quad_string_to((a[0], a[1])),
    "A": lambda p, a: p.arc_to(*_arc_args(a)),
    "a": lambda p, a: p.r_arc_to(*_arc_args(a)),
    "Z": lambda p, _: p.close_path(),
    "z": lambda p, _: p.close_path(),
}
