"""
chromahex Color
===============

The immutable ``Color`` value type, its constructors and its accessors.

Features
--------
- Immutable color instances (frozen after initialization)
- Channels stored exactly as supplied; nothing is clamped
- Construction from unit floats, 8-bit integers and hex strings
- Hex output as lowercase ``#rrggbb`` with alpha returned alongside

Usage
-----
>>> from chromahex.colors import rgb255, from_hex, to_hex, to_rgba
>>>
>>> accent = rgb255(255, 128, 0)
>>> to_hex(accent)
HexColor(hex='#ff8000', alpha=1.0)
>>>
>>> glass = from_hex("#ff800080")
>>> round(to_rgba(glass).alpha, 3)
0.502
>>>
>>> # Every function is also a method or static constructor
>>> from chromahex.colors import Color
>>> Color.from_hex("fa0").to_rgb255()
(255, 170, 0)

Notes
-----
- ``from_hex`` raises ``HexParseError``; ``try_from_hex`` returns a
  ``HexParseResult`` instead.
- Out-of-range channels are stored verbatim; ``to_hex`` clamps only its
  output bytes and warns when it does.
"""

from .color_base import Color, RGBA, HexColor
from .color import (
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


__all__ = [
    'Color',
    'RGBA',
    'HexColor',
    'HexParseResult',
    'rgba',
    'rgb',
    'from_rgba',
    'rgb255',
    'rgba255',
    'from_hex',
    'try_from_hex',
    'to_rgba',
    'to_hex',
    'to_format',
    'to_rgb255',
    'with_alpha',
]
