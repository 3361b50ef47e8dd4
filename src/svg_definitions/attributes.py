"""Names of svg attributes.

:created: 2026-10-18

This is a lookup table. Each member's value is the attribute name as written in
svg. Member names are the svg names in upper snake case (`viewBox` is
`Attribute.VIEW_BOX`, `xlink:href` is `Attribute.XLINK_HREF`). A few aliases with
descriptive names follow the table: `Attribute.PATH_DEFINITION is Attribute.D`.

Note that `Attribute.RADIUS` is the feMorphology `radius` attribute. The circle
radius is `Attribute.R`.
"""

from __future__ import annotations

import enum

from svg_definitions.exceptions import AttributeNotFoundError


class Attribute(enum.Enum):
    """An svg attribute name."""

    ACCENT_HEIGHT = "accent-height"
    ACCUMULATE = "accumulate"
    ADDITIVE = "additive"
    ALIGNMENT_BASELINE = "alignment-baseline"
    ALLOW_REORDER = "allowReorder"
    ALPHABETIC = "alphabetic"
    AMPLITUDE = "amplitude"
    ARABIC_FORM = "arabic-form"
    ASCENT = "ascent"
    ATTRIBUTE_NAME = "attributeName"
    ATTRIBUTE_TYPE = "attributeType"
    AUTO_REVERSE = "autoReverse"
    AZIMUTH = "azimuth"
    BASE_FREQUENCY = "baseFrequency"
    BASELINE_SHIFT = "baseline-shift"
    BASE_PROFILE = "baseProfile"
    BBOX = "bbox"
    BEGIN = "begin"
    BIAS = "bias"
    BY = "by"
    CALC_MODE = "calcMode"
    CAP_HEIGHT = "cap-height"
    CLASS = "class"
    CLIP = "clip"
    CLIP_PATH_UNITS = "clipPathUnits"
    CLIP_PATH = "clip-path"
    CLIP_RULE = "clip-rule"
    COLOR = "color"
    COLOR_INTERPOLATION = "color-interpolation"
    COLOR_INTERPOLATION_FILTERS = "color-interpolation-filters"
    COLOR_PROFILE = "color-profile"
    COLOR_RENDERING = "color-rendering"
    CONTENT_SCRIPT_TYPE = "contentScriptType"
    CONTENT_STYLE_TYPE = "contentStyleType"
    CURSOR = "cursor"
    CX = "cx"
    CY = "cy"
    D = "d"
    DECELERATE = "decelerate"
    DESCENT = "descent"
    DIFFUSE_CONSTANT = "diffuseConstant"
    DIRECTION = "direction"
    DISPLAY = "display"
    DIVISOR = "divisor"
    DOMINANT_BASELINE = "dominant-baseline"
    DUR = "dur"
    DX = "dx"
    DY = "dy"
    EDGE_MODE = "edgeMode"
    ELEVATION = "elevation"
    ENABLE_BACKGROUND = "enable-background"
    END = "end"
    EXPONENT = "exponent"
    EXTERNAL_RESOURCES_REQUIRED = "externalResourcesRequired"
    FILL = "fill"
    FILL_OPACITY = "fill-opacity"
    FILL_RULE = "fill-rule"
    FILTER = "filter"
    FILTER_RES = "filterRes"
    FILTER_UNITS = "filterUnits"
    FLOOD_COLOR = "flood-color"
    FLOOD_OPACITY = "flood-opacity"
    FONT_FAMILY = "font-family"
    FONT_SIZE = "font-size"
    FONT_SIZE_ADJUST = "font-size-adjust"
    FONT_STRETCH = "font-stretch"
    FONT_STYLE = "font-style"
    FONT_VARIANT = "font-variant"
    FONT_WEIGHT = "font-weight"
    FORMAT = "format"
    FROM = "from"
    FR = "fr"
    FX = "fx"
    FY = "fy"
    G1 = "g1"
    G2 = "g2"
    GLYPH_NAME = "glyph-name"
    GLYPH_ORIENTATION_HORIZONTAL = "glyph-orientation-horizontal"
    GLYPH_ORIENTATION_VERTICAL = "glyph-orientation-vertical"
    GLYPH_REF = "glyphRef"
    GRADIENT_TRANSFORM = "gradientTransform"
    GRADIENT_UNITS = "gradientUnits"
    HANGING = "hanging"
    HEIGHT = "height"
    HREF = "href"
    HREFLANG = "hreflang"
    HORIZ_ADV_X = "horiz-adv-x"
    HORIZ_ORIGIN_X = "horiz-origin-x"
    ID = "id"
    IDEOGRAPHIC = "ideographic"
    IMAGE_RENDERING = "image-rendering"
    IN = "in"
    IN2 = "in2"
    INTERCEPT = "intercept"
    K = "k"
    K1 = "k1"
    K2 = "k2"
    K3 = "k3"
    K4 = "k4"
    KERNEL_MATRIX = "kernelMatrix"
    KERNEL_UNIT_LENGTH = "kernelUnitLength"
    KERNING = "kerning"
    KEY_POINTS = "keyPoints"
    KEY_SPLINES = "keySplines"
    KEY_TIMES = "keyTimes"
    LANG = "lang"
    LENGTH_ADJUST = "lengthAdjust"
    LETTER_SPACING = "letter-spacing"
    LIGHTING_COLOR = "lighting-color"
    LIMITING_CONE_ANGLE = "limitingConeAngle"
    LOCAL = "local"
    MARKER_END = "marker-end"
    MARKER_MID = "marker-mid"
    MARKER_START = "marker-start"
    MARKER_HEIGHT = "markerHeight"
    MARKER_UNITS = "markerUnits"
    MARKER_WIDTH = "markerWidth"
    MASK = "mask"
    MASK_CONTENT_UNITS = "maskContentUnits"
    MASK_UNITS = "maskUnits"
    MATHEMATICAL = "mathematical"
    MAX = "max"
    MEDIA = "media"
    METHOD = "method"
    MIN = "min"
    MODE = "mode"
    NAME = "name"
    NUM_OCTAVES = "numOctaves"
    OFFSET = "offset"
    OPACITY = "opacity"
    OPERATOR = "operator"
    ORDER = "order"
    ORIENT = "orient"
    ORIENTATION = "orientation"
    ORIGIN = "origin"
    OVERFLOW = "overflow"
    OVERLINE_POSITION = "overline-position"
    OVERLINE_THICKNESS = "overline-thickness"
    PANOSE_1 = "panose-1"
    PAINT_ORDER = "paint-order"
    PATH = "path"
    PATH_LENGTH = "pathLength"
    PATTERN_CONTENT_UNITS = "patternContentUnits"
    PATTERN_TRANSFORM = "patternTransform"
    PATTERN_UNITS = "patternUnits"
    PING = "ping"
    POINTER_EVENTS = "pointer-events"
    POINTS = "points"
    POINTS_AT_X = "pointsAtX"
    POINTS_AT_Y = "pointsAtY"
    POINTS_AT_Z = "pointsAtZ"
    PRESERVE_ALPHA = "preserveAlpha"
    PRESERVE_ASPECT_RATIO = "preserveAspectRatio"
    PRIMITIVE_UNITS = "primitiveUnits"
    R = "r"
    RADIUS = "radius"
    REFERRER_POLICY = "referrerPolicy"
    REF_X = "refX"
    REF_Y = "refY"
    REL = "rel"
    RENDERING_INTENT = "rendering-intent"
    REPEAT_COUNT = "repeatCount"
    REPEAT_DUR = "repeatDur"
    REQUIRED_EXTENSIONS = "requiredExtensions"
    REQUIRED_FEATURES = "requiredFeatures"
    RESTART = "restart"
    RESULT = "result"
    ROTATE = "rotate"
    RX = "rx"
    RY = "ry"
    SLOPE = "slope"
    SPACING = "spacing"
    SPECULAR_CONSTANT = "specularConstant"
    SPECULAR_EXPONENT = "specularExponent"
    SPEED = "speed"
    SPREAD_METHOD = "spreadMethod"
    START_OFFSET = "startOffset"
    STD_DEVIATION = "stdDeviation"
    STEMH = "stemh"
    STEMV = "stemv"
    STITCH_TILES = "stitchTiles"
    STOP_COLOR = "stop-color"
    STOP_OPACITY = "stop-opacity"
    STRIKETHROUGH_POSITION = "strikethrough-position"
    STRIKETHROUGH_THICKNESS = "strikethrough-thickness"
    STRING = "string"
    STROKE = "stroke"
    STROKE_DASHARRAY = "stroke-dasharray"
    STROKE_DASHOFFSET = "stroke-dashoffset"
    STROKE_LINECAP = "stroke-linecap"
    STROKE_LINEJOIN = "stroke-linejoin"
    STROKE_MITERLIMIT = "stroke-miterlimit"
    STROKE_OPACITY = "stroke-opacity"
    STROKE_WIDTH = "stroke-width"
    STYLE = "style"
    SURFACE_SCALE = "surfaceScale"
    SYSTEM_LANGUAGE = "systemLanguage"
    TABINDEX = "tabindex"
    TABLE_VALUES = "tableValues"
    TARGET = "target"
    TARGET_X = "targetX"
    TARGET_Y = "targetY"
    TEXT_ANCHOR = "text-anchor"
    TEXT_DECORATION = "text-decoration"
    TEXT_RENDERING = "text-rendering"
    TEXT_LENGTH = "textLength"
    TO = "to"
    TRANSFORM = "transform"
    TYPE = "type"
    U1 = "u1"
    U2 = "u2"
    UNDERLINE_POSITION = "underline-position"
    UNDERLINE_THICKNESS = "underline-thickness"
    UNICODE = "unicode"
    UNICODE_BIDI = "unicode-bidi"
    UNICODE_RANGE = "unicode-range"
    UNITS_PER_EM = "units-per-em"
    V_ALPHABETIC = "v-alphabetic"
    V_HANGING = "v-hanging"
    V_IDEOGRAPHIC = "v-ideographic"
    V_MATHEMATICAL = "v-mathematical"
    VALUES = "values"
    VECTOR_EFFECT = "vector-effect"
    VERSION = "version"
    VERT_ADV_Y = "vert-adv-y"
    VERT_ORIGIN_X = "vert-origin-x"
    VERT_ORIGIN_Y = "vert-origin-y"
    VIEW_BOX = "viewBox"
    VIEW_TARGET = "viewTarget"
    VISIBILITY = "visibility"
    WIDTH = "width"
    WIDTHS = "widths"
    WORD_SPACING = "word-spacing"
    WRITING_MODE = "writing-mode"
    X = "x"
    X_HEIGHT = "x-height"
    X1 = "x1"
    X2 = "x2"
    X_CHANNEL_SELECTOR = "xChannelSelector"
    XLINK_ACTUATE = "xlink:actuate"
    XLINK_ARCROLE = "xlink:arcrole"
    XLINK_HREF = "xlink:href"
    XLINK_ROLE = "xlink:role"
    XLINK_SHOW = "xlink:show"
    XLINK_TITLE = "xlink:title"
    XLINK_TYPE = "xlink:type"
    XML_BASE = "xml:base"
    XML_LANG = "xml:lang"
    XML_SPACE = "xml:space"
    Y = "y"
    Y1 = "y1"
    Y2 = "y2"
    Y_CHANNEL_SELECTOR = "yChannelSelector"
    Z = "z"
    ZOOM_AND_PAN = "zoomAndPan"

    # aliases
    STROKE_COLOR = "stroke"
    FILL_COLOR = "fill"
    CENTER_X = "cx"
    CENTER_Y = "cy"
    IDENTIFIER = "id"
    POSITION_X = "x"
    POSITION_Y = "y"
    RADIUS_X = "rx"
    RADIUS_Y = "ry"
    REFERENCE = "href"
    PATH_DEFINITION = "d"

    @classmethod
    def from_name(cls, name: str) -> Attribute:
        """Look up an attribute by its svg name.

        :param name: attribute name as written in svg, e.g. "stroke-width"
        :return: Attribute member
        :raises AttributeNotFoundError: if no member has this name
        """
        try:
            return cls(name)
        except ValueError as e:
            raise AttributeNotFoundError(name) from e
