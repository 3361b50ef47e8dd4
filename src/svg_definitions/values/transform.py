"""Transform lists for the transform, gradientTransform, and patternTransform
attributes.

:created: 2026-10-18

Like PathData, a TransformList is built with chained calls that each return a new
instance. Arguments are space delimited inside the parentheses, the same way
`matrix(a b c d e f)` is written elsewhere in svg.

    >>> str(TransformList().translate(10, 20).rotate(45))
    'translate(10.00 20.00) rotate(45.00)'
"""

from __future__ import annotations

import dataclasses
import re

from svg_definitions.string_conversion import format_numbers
from svg_definitions.values.base import SvgValue

_TRANSFORM_FUNCTION = re.compile(r"\s*(?P<name>[a-zA-Z]+)\s*\((?P<args>[^()]*)\)\s*,?")

# number of arguments each transform function accepts
_ARG_COUNTS = {
    "matrix": {6},
    "translate": {1, 2},
    "scale": {1, 2},
    "rotate": {1, 3},
    "skewX": {1},
    "skewY": {1},
}


@dataclasses.dataclass(frozen=True, eq=False)
class TransformList(SvgValue):
    """A sequence of svg transform functions."""

    functions: tuple[tuple[str, tuple[float, ...]], ...] = ()

    def __str__(self) -> str:
        return " ".join(
            f"{name}({' '.join(format_numbers(args))})"
            for name, args in self.functions
        )

    def _push(self, name: str, *args: float) -> TransformList:
        return TransformList((*self.functions, (name, args)))

    def matrix(
        self, a: float, b: float, c: float, d: float, e: float, f: float
    ) -> TransformList:
        """Append a transformation matrix.

        a: scale x
        b: skew y
        c: skew x
        d: scale y
        e: translate x
        f: translate y
        """
        return self._push("matrix", a, b, c, d, e, f)

    def translate(self, tx: float, ty: float = 0) -> TransformList:
        """Append a translation."""
        return self._push("translate", tx, ty)

    def scale(self, sx: float, sy: float | None = None) -> TransformList:
        """Append a scale. Scale uniformly if sy is None."""
        if sy is None:
            return self._push("scale", sx)
        return self._push("scale", sx, sy)

    def rotate(
        self, angle: float, center: tuple[float, float] | None = None
    ) -> TransformList:
        """Append a rotation in degrees, optionally about a center point."""
        if center is None:
            return self._push("rotate", angle)
        return self._push("rotate", angle, *center)

    def skew_x(self, angle: float) -> TransformList:
        return self._push("skewX", angle)

    def skew_y(self, angle: float) -> TransformList:
        return self._push("skewY", angle)

    @classmethod
    def from_str(cls, text: str) -> TransformList:
        """Read a transform attribute.

        :param text: e.g. "translate(10, 20) rotate(45)"
        :return: TransformList
        :raises ValueError: for an unknown function, a wrong number of arguments,
            or text between functions
        """
        functions: list[tuple[str, tuple[float, ...]]] = []
        pos = 0
        text = text.strip()
        while pos < len(text):
            match = _TRANSFORM_FUNCTION.match(text, pos)
            if match is None:
                msg = f"Cannot parse a transform list from {text!r} at index {pos}"
                raise ValueError(msg)
            name = match["name"]
            args = tuple(float(a) for a in re.split(r"[\s,]+", match["args"]) if a)
            if len(args) not in _ARG_COUNTS.get(name, set()):
                msg = f"Invalid transform function {match.group().strip()!r}"
                raise ValueError(msg)
            functions.append((name, args))
            pos = match.end()
        return cls(tuple(functions))
