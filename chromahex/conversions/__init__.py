"""
chromahex Conversions
=====================

Numeric and string conversions for RGBA colors, with scalar and vectorized
(numpy) implementations.

Byte conversion
---------------
    byte_to_unit(value) / np_byte_to_unit(values)
        8-bit value -> unit interval, ``value / 255``
    unit_to_byte(value) / np_unit_to_byte(values)
        unit interval -> nearest 8-bit value
    unit_to_clamped_byte(value) / np_unit_to_clamped_byte(values)
        Same, clamped to [0, 255] in float space; total over inf and NaN
    unit_to_format(value, fmt) / format_to_unit(value, fmt)
        Scale between the unit interval and a FormatType range

Hex strings
-----------
    parse_hex_bytes(text)
        ``"#rgb"``, ``"#rgba"``, ``"#rrggbb"``, ``"#rrggbbaa"`` -> tuple of bytes
    parse_hex(text)
        Same grammar -> unit (r, g, b, a), alpha defaulting to 1.0
    format_hex(r, g, b)
        unit RGB -> ``"#rrggbb"`` (lowercase)
    np_parse_hex(texts) / np_format_hex(array)
        Batch versions over ``(N, 4)`` arrays

Examples
--------
>>> from chromahex.conversions import parse_hex, format_hex
>>> parse_hex("#f80")
(1.0, 0.5333333333333333, 0.0, 1.0)
>>> format_hex(1.0, 0.5333333333333333, 0.0)
'#ff8800'
"""

from .numbers import (
    byte_to_unit,
    unit_to_byte,
    byte_in_range,
    unit_to_clamped_byte,
    unit_to_format,
    format_to_unit,
    np_byte_to_unit,
    np_unit_to_byte,
    np_byte_in_range,
    np_unit_to_clamped_byte,
)

from .hex_codec import (
    HEX_MARKER,
    HEX_LAYOUTS,
    HexLayout,
    strip_marker,
    parse_hex_bytes,
    parse_hex,
    format_hex,
    np_parse_hex,
    np_format_hex,
)

from ..types.format_type import FormatType

__all__ = [
    # Bytes
    'byte_to_unit',
    'unit_to_byte',
    'byte_in_range',
    'unit_to_clamped_byte',
    'unit_to_format',
    'format_to_unit',
    'np_byte_to_unit',
    'np_unit_to_byte',
    'np_byte_in_range',
    'np_unit_to_clamped_byte',

    # Hex
    'HEX_MARKER',
    'HEX_LAYOUTS',
    'HexLayout',
    'strip_marker',
    'parse_hex_bytes',
    'parse_hex',
    'format_hex',
    'np_parse_hex',
    'np_format_hex',

    # Types
    'FormatType',
]
