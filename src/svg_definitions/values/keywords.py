"""Attribute values drawn from a fixed set of svg keywords.

:created: 2026-10-18

Each enumeration value is the keyword as written in svg. Members render and hash
like their keyword, so `FillRule.EVENODD` and `RawValue("evenodd")` hash the same
(they are still not equal).
"""

from __future__ import annotations

import enum


class Keyword(enum.Enum):
    """Parent class for keyword enumerations."""

    def __str__(self) -> str:
        return str(self.value)

    def __hash__(self) -> int:
        return hash(str(self))

    def clone(self) -> Keyword:
        """Members are singletons. Return self."""
        return self


class PaintKeyword(Keyword):
    """Keyword values of the fill and stroke attributes."""

    NONE = "none"
    CURRENT_COLOR = "currentColor"
    TRANSPARENT = "transparent"
    CONTEXT_FILL = "context-fill"
    CONTEXT_STROKE = "context-stroke"


class FillRule(Keyword):
    """fill-rule and clip-rule."""

    NONZERO = "nonzero"
    EVENODD = "evenodd"


class StrokeLinecap(Keyword):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class StrokeLinejoin(Keyword):
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"
    BEVEL = "bevel"
    ARCS = "arcs"


class SpreadMethod(Keyword):
    PAD = "pad"
    REFLECT = "reflect"
    REPEAT = "repeat"


class Units(Keyword):
    """gradientUnits, patternUnits, clipPathUnits, maskUnits, and the like."""

    USER_SPACE_ON_USE = "userSpaceOnUse"
    OBJECT_BOUNDING_BOX = "objectBoundingBox"


class Visibility(Keyword):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    COLLAPSE = "collapse"


class TextAnchor(Keyword):
    START = "start"
    MIDDLE = "middle"
    END = "end"


class NoneKeyword(Keyword):
    """The "none" of clip-path, mask, filter, and the marker attributes."""

    NONE = "none"


# ===================================================================================
#   Animation attributes
# ===================================================================================


class Restart(Keyword):
    ALWAYS = "always"
    WHEN_NOT_ACTIVE = "whenNotActive"
    NEVER = "never"


class Additive(Keyword):
    REPLACE = "replace"
    SUM = "sum"


class Accumulate(Keyword):
    NONE = "none"
    SUM = "sum"


class CalcMode(Keyword):
    DISCRETE = "discrete"
    LINEAR = "linear"
    PACED = "paced"
    SPLINE = "spline"