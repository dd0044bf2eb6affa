"""chromahex: lossless RGBA color values with hex parsing and formatting."""

from .colors.color_base import Color, RGBA, HexColor
from .colors.color import (
    HexParseResult,
    rgba,
    rgb,
    from_rgba,
    rgb255,
    rgba255,
    from_hex,
    try_from_hex,
    to_rgba,
    to_hex,
    to_format,
    to_rgb255,
    with_alpha,
)
from .errors import HexParseError
from .types.format_type import FormatType

from .color_arr import ColorArray
from .conversions import (
    byte_to_unit,
    unit_to_byte,
    parse_hex,
    format_hex,
    np_parse_hex,
    np_format_hex,
)

__all__ = [
    # core color type
    "Color",
    "RGBA",
    "HexColor",
    "HexParseResult",
    "HexParseError",
    "FormatType",
    # constructors
    "rgba",
    "rgb",
    "from_rgba",
    "rgb255",
    "rgba255",
    "from_hex",
    "try_from_hex",
    # accessors
    "to_rgba",
    "to_hex",
    "to_format",
    "to_rgb255",
    "with_alpha",
    # arrays
    "ColorArray",
    # conversions
    "byte_to_unit",
    "unit_to_byte",
    "parse_hex",
    "format_hex",
    "np_parse_hex",
    "np_format_hex",
]
