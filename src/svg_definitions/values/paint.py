"""Paint values for the fill and stroke attributes.

:created: 2026-10-18

A paint is a keyword (none, currentColor, ...), a Color, or a reference to a
paint server (a gradient or pattern) with an optional fallback:

    url(#gradient1)
    url(#gradient1) #ff0000
"""

from __future__ import annotations

import dataclasses
import re
from typing import TypeAlias

from svg_definitions.values.base import SvgValue
from svg_definitions.values.color import Color, parse_color
from svg_definitions.values.identifier import Identifier
from svg_definitions.values.keywords import PaintKeyword

_URL = re.compile(r"^url\(\s*#(?P<id>[^)]*?)\s*\)\s*(?P<fallback>.*)$")


@dataclasses.dataclass(frozen=True, eq=False)
class PaintServer(SvgValue):
    """A reference to a gradient or pattern by id, with an optional fallback."""

    identifier: Identifier
    fallback: Color | PaintKeyword | None = None

    def __str__(self) -> str:
        url = f"url(#{self.identifier})"
        if self.fallback is None:
            return url
        return f"{url} {self.fallback}"


Paint: TypeAlias = PaintKeyword | Color | PaintServer


def _parse_color_or_keyword(text: str) -> Color | PaintKeyword:
    """Read a paint keyword or a color.

    :raises ValueError: if text is neither
    """
    try:
        return PaintKeyword(text)
    except ValueError:
        return parse_color(text)


def parse_paint(text: str) -> Paint:
    """Read a fill or stroke value.

    :param text: e.g. "none", "#fff", "rgb(1,2,3)", "url(#grad) red"
    :return: PaintKeyword, Color, or PaintServer
    :raises ValueError: if text is not a recognized paint. Named colors like "red"
        are not recognized.
    """
    text = text.strip()
    match = _URL.match(text)
    if match is None:
        return _parse_color_or_keyword(text)
    fallback = match["fallback"].strip()
    return PaintServer(
        Identifier(match["id"]),
        _parse_color_or_keyword(fallback) if fallback else None,
    )
