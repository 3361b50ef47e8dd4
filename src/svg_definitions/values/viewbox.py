"""The viewBox attribute value.

:created: 2026-10-18
"""

from __future__ import annotations

import dataclasses
import re

from svg_definitions.values.base import SvgValue


@dataclasses.dataclass(frozen=True, eq=False)
class ViewBox(SvgValue):
    """Four integers: x and y of the upper-left corner, width, and height."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        """Store each field as an int.

        :raises ValueError: if any field is not a whole number
        """
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not float(value).is_integer():
                msg = f"ViewBox {field.name} must be a whole number, not {value!r}"
                raise ValueError(msg)
            object.__setattr__(self, field.name, int(value))

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.width} {self.height}"

    def padded(self, pad: int | tuple[int, int, int, int]) -> ViewBox:
        """Increase the view box by pad in all directions.

        :param pad: one value for all sides or (top, right, bottom, left)
        :return: a new ViewBox
        """
        if not isinstance(pad, tuple):
            pad = (pad, pad, pad, pad)
        pad_t, pad_r, pad_b, pad_l = pad
        return ViewBox(
            self.x - pad_l,
            self.y - pad_t,
            self.width + pad_l + pad_r,
            self.height + pad_t + pad_b,
        )


def parse_viewbox(text: str) -> ViewBox:
    """Read a viewBox attribute.

    :param text: four whole numbers separated by whitespace and/or commas
    :return: ViewBox
    :raises ValueError: if there are not four numbers or any is not a whole number
    """
    parts = [p for p in re.split(r"[\s,]+", text.strip()) if p]
    if len(parts) != 4:
        msg = f"A viewBox needs exactly 4 numbers, not {text!r}"
        raise ValueError(msg)
    numbers = [float(p) for p in parts]
    if not all(n.is_integer() for n in numbers):
        msg = f"Only whole numbers are supported in a viewBox: {text!r}"
        raise ValueError(msg)
    x, y, width, height = (int(n) for n in numbers)
    return ViewBox(x, y, width, height)
