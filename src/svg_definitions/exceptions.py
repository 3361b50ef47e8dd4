"""Errors raised while building or reading svg documents.

:created: 2026-10-18

Every error here is a ValueError, so a caller can reject one malformed value
(an id, a color, a line of text) without aborting a larger document build.
"""

from __future__ import annotations


class InvalidCharacterError(ValueError):
    """An identifier or reference contains a character outside [A-Za-z0-9_ -]."""

    def __init__(self, text: str, position: int) -> None:
        """Record the offending string and the index of the first bad character.

        :param text: the string passed to the constructor
        :param position: index of the first disallowed character
        """
        self.text = text
        self.position = position
        msg = f"Invalid character {text[position]!r} at index {position} in {text!r}"
        super().__init__(msg)


class InvalidColorFormatError(ValueError):
    """A color string is not #rgb, #rrggbb, or css functional notation."""

    def __init__(self, text: str) -> None:
        self.text = text
        msg = f"Cannot parse a color from {text!r}"
        super().__init__(msg)


class InvalidInnerTextError(ValueError):
    """Inner text contains a character outside the allowed set."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        msg = (
            f"Inner text may not contain {text[position]!r} "
            + f"(index {position} in {text!r})"
        )
        super().__init__(msg)


class InvalidPathDataError(ValueError):
    """A path data string does not follow the path grammar."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        msg = f"Cannot read path data {text!r}: {reason}"
        super().__init__(msg)


class TagNotFoundError(ValueError):
    """No TagName matches a tag string."""

    def __init__(self, name: str) -> None:
        self.name = name
        msg = f"Unknown svg tag: {name!r}"
        super().__init__(msg)


class AttributeNotFoundError(ValueError):
    """No Attribute matches an attribute name."""

    def __init__(self, name: str) -> None:
        self.name = name
        msg = f"Unknown svg attribute: {name!r}"
        super().__init__(msg)


class NoElementError(ValueError):
    """The parser was given a document without an element."""
