"""Names of svg elements.

:created: 2026-10-18

This is a lookup table. Each member's value is the tag as written in svg. Member
names are the tags in upper snake case (`linearGradient` is
`TagName.LINEAR_GRADIENT`). `TagName.GROUP` is an alias for `TagName.G`.
"""

from __future__ import annotations

import enum

from svg_definitions.exceptions import TagNotFoundError


class TagName(enum.Enum):
    """An svg element tag."""

    A = "a"
    ANIMATE = "animate"
    ANIMATE_MOTION = "animateMotion"
    ANIMATE_TRANSFORM = "animateTransform"
    CIRCLE = "circle"
    CLIP_PATH = "clipPath"
    COLOR_PROFILE = "color-profile"
    DEFS = "defs"
    DESC = "desc"
    DISCARD = "discard"
    ELLIPSE = "ellipse"
    FE_BLEND = "feBlend"
    FE_COLOR_MATRIX = "feColorMatrix"
    FE_COMPONENT_TRANSFER = "feComponentTransfer"
    FE_COMPOSITE = "feComposite"
    FE_CONVOLVE_MATRIX = "feConvolveMatrix"
    FE_DIFFUSE_LIGHTING = "feDiffuseLighting"
    FE_DISPLACEMENT_MAP = "feDisplacementMap"
    FE_DISTANT_LIGHT = "feDistantLight"
    FE_DROP_SHADOW = "feDropShadow"
    FE_FLOOD = "feFlood"
    FE_FUNC_A = "feFuncA"
    FE_FUNC_B = "feFuncB"
    FE_FUNC_G = "feFuncG"
    FE_FUNC_R = "feFuncR"
    FE_GAUSSIAN_BLUR = "feGaussianBlur"
    FE_IMAGE = "feImage"
    FE_MERGE = "feMerge"
    FE_MERGE_NODE = "feMergeNode"
    FE_MORPHOLOGY = "feMorphology"
    FE_OFFSET = "feOffset"
    FE_POINT_LIGHT = "fePointLight"
    FE_SPECULAR_LIGHTING = "feSpecularLighting"
    FE_SPOT_LIGHT = "feSpotLight"
    FE_TILE = "feTile"
    FE_TURBULENCE = "feTurbulence"
    FILTER = "filter"
    FOREIGN_OBJECT = "foreignObject"
    G = "g"
    HATCH = "hatch"
    HATCHPATH = "hatchpath"
    IMAGE = "image"
    LINE = "line"
    LINEAR_GRADIENT = "linearGradient"
    MARKER = "marker"
    MASK = "mask"
    MESH = "mesh"
    MESHGRADIENT = "meshgradient"
    MESHPATCH = "meshpatch"
    MESHROW = "meshrow"
    METADATA = "metadata"
    MPATH = "mpath"
    PATH = "path"
    PATTERN = "pattern"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    RADIAL_GRADIENT = "radialGradient"
    RECT = "rect"
    SCRIPT = "script"
    SET = "set"
    SOLIDCOLOR = "solidcolor"
    STOP = "stop"
    STYLE = "style"
    SVG = "svg"
    SWITCH = "switch"
    SYMBOL = "symbol"
    TEXT = "text"
    TEXT_PATH = "textPath"
    TITLE = "title"
    TSPAN = "tspan"
    UNKNOWN = "unknown"
    USE = "use"
    VIEW = "view"

    # aliases
    GROUP = "g"

    @classmethod
    def from_name(cls, name: str) -> TagName:
        """Look up a tag by its svg name.

        :param name: tag as written in svg. An exact match is preferred, then a
            case-insensitive one ("LinearGradient" finds "linearGradient").
        :return: TagName member
        :raises TagNotFoundError: if no member has this name
        """
        try:
            return cls(name)
        except ValueError as e:
            folded = _CASEFOLDED_TAGS.get(name.casefold())
            if folded is None:
                raise TagNotFoundError(name) from e
            return folded


_CASEFOLDED_TAGS = {x.value.casefold(): x for x in TagName}
