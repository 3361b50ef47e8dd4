"""Identifiers (id attributes) and references to them.

:created: 2026-10-18

A Reference names another element by its id. It never holds the element itself,
so an Element tree stays a tree even with `href="#id"` links between branches.
"""

from __future__ import annotations

import dataclasses
import re
import string

from svg_definitions.exceptions import InvalidCharacterError
from svg_definitions.values.base import SvgValue

_ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-_ ")
_URL = re.compile(r"^url\(\s*#(?P<id>[^)]*?)\s*\)$")


def find_invalid_character(text: str) -> int | None:
    """Find the first character not allowed in an identifier.

    :param text: candidate identifier
    :return: index of the first disallowed character or None if all are allowed
    """
    for index, char in enumerate(text):
        if char not in _ALLOWED_CHARACTERS:
            return index
    return None


@dataclasses.dataclass(frozen=True, eq=False)
class Identifier(SvgValue):
    """A string of ascii letters, digits, `-`, `_`, and spaces."""

    value: str

    def __post_init__(self) -> None:
        """Validate the characters in value.

        :raises InvalidCharacterError: at the first character outside the set
        """
        position = find_invalid_character(self.value)
        if position is not None:
            raise InvalidCharacterError(self.value, position)

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True, eq=False)
class Reference(SvgValue):
    """A fragment reference to an Identifier. Renders as `#id`."""

    identifier: Identifier

    def __str__(self) -> str:
        return f"#{self.identifier}"


def new_reference(text: str) -> Reference:
    """Create a Reference from an id string (without the leading `#`).

    :param text: the id of the referenced element
    :return: Reference to `text`
    :raises InvalidCharacterError: if text is not a valid Identifier
    """
    return Reference(Identifier(text))


def parse_reference(text: str) -> Reference:
    """Read a `#id` fragment reference.

    :param text: attribute text, e.g. "#arrow-head"
    :return: Reference to "arrow-head"
    :raises ValueError: if text does not start with `#`
    :raises InvalidCharacterError: if the id is not a valid Identifier
    """
    text = text.strip()
    if not text.startswith("#"):
        msg = f"A reference must start with '#', not {text!r}"
        raise ValueError(msg)
    return new_reference(text[1:])


@dataclasses.dataclass(frozen=True, eq=False)
class UrlReference(SvgValue):
    """A functional reference for clip-path, mask, filter, and the marker
    attributes. Renders as `url(#id)`."""

    identifier: Identifier

    def __str__(self) -> str:
        return f"url(#{self.identifier})"


def parse_url_reference(text: str) -> UrlReference:
    """Read a `url(#id)` reference.

    :param text: attribute text, e.g. "url(#clip1)"
    :return: UrlReference to "clip1"
    :raises ValueError: if text is not `url(#...)`
    :raises InvalidCharacterError: if the id is not a valid Identifier
    """
    match = _URL.match(text.strip())
    if match is None:
        msg = f"A url reference must look like 'url(#id)', not {text!r}"
        raise ValueError(msg)
    return UrlReference(Identifier(match["id"]))
