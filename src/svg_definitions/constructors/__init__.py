"""Raise the level of the constructors module.

:created: 2026-10-18
"""

from svg_definitions.constructors.new_element import new_element, update_element

__all__ = ["new_element", "update_element"]
