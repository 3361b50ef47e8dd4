"""Shared equality and hashing for attribute values.

:created: 2026-10-18

An attribute value is defined by what it writes into the svg. Two values of the
same type are equal when they render the same text, and any two values (of any
type) that render the same text hash the same. Rounded numeric values therefore
compare and hash by their rounded form. The one cross-type equality is a
percentage Length, which equals the Percentage it renders like.
"""

from __future__ import annotations

import copy
import dataclasses
from typing import TypeVar

_T = TypeVar("_T", bound="SvgValue")


class SvgValue:
    """Parent class for every non-keyword attribute value.

    Subclasses are frozen dataclasses (or otherwise immutable) and implement
    `__str__` to return their canonical svg text.
    """

    __slots__ = ()

    def __str__(self) -> str:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        """Equal if the same type and the same canonical text.

        :param other: any object
        :return: True if other is the same value
        """
        if type(self) is not type(other):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        """Hash the canonical text.

        :return: hash of str(self)
        """
        return hash(str(self))

    def clone(self: _T) -> _T:
        """Return an independent copy of this value.

        :return: a new instance equal to self
        """
        return copy.copy(self)


@dataclasses.dataclass(frozen=True, eq=False)
class RawValue(SvgValue):
    """Attribute text that no other value type recognizes. Written as is."""

    text: str

    def __str__(self) -> str:
        return self.text
