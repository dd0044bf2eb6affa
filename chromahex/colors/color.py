from __future__ import annotations
from collections.abc import Mapping
from typing import Any, NamedTuple, Optional, Tuple, Union
from .color_base import Color, RGBA, HexColor
from ..errors import HexParseError
from ..conversions import byte_to_unit, unit_to_byte, unit_to_format, parse_hex, format_hex
from ..types.format_type import FormatType, DEFAULT_ALPHA
from ..types.color_types import Scalar, CHANNELS


class HexParseResult(NamedTuple):
    """Outcome of ``try_from_hex``: exactly one of ``color`` or ``error`` is set."""
    color: Optional[Color]
    error: Optional[HexParseError]

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Color:
        """Return the color, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.color  # type: ignore[return-value]


# ------------------ CONSTRUCTORS ------------------

def rgba(red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar) -> Color:
    """Build a color from unit-interval channels. Values are stored verbatim."""
    return Color(red, green, blue, alpha)


def rgb(red: Scalar, green: Scalar, blue: Scalar) -> Color:
    """Build an opaque color from unit-interval channels."""
    return Color(red, green, blue, DEFAULT_ALPHA)


def from_rgba(record: Union[RGBA, Mapping, Any]) -> Color:
    """
    Build a color from a record with ``red``, ``green``, ``blue`` and ``alpha``.

    Args:
        record: An ``RGBA`` tuple, any object exposing those attributes,
                or a mapping with those keys.

    Returns:
        New Color holding the record's values unchanged.
    """
    if isinstance(record, Mapping):
        return Color(*(record[name] for name in CHANNELS))
    return Color(*(getattr(record, name) for name in CHANNELS))


def rgb255(red: int, green: int, blue: int) -> Color:
    """Build an opaque color from 8-bit channels, each divided by 255."""
    return Color(byte_to_unit(red), byte_to_unit(green), byte_to_unit(blue), DEFAULT_ALPHA)


def rgba255(red: int, green: int, blue: int, alpha: int) -> Color:
    return Color(byte_to_unit(red), byte_to_unit(green), byte_to_unit(blue), byte_to_unit(alpha))


def from_hex(text: str) -> Color:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional, any case).

    Raises:
        HexParseError: If ``text`` is not a valid hex color.
    """
    return Color(*parse_hex(text))


def try_from_hex(text: str) -> HexParseResult:
    """Like ``from_hex``, but report failure in the result instead of raising."""
    try:
        return HexParseResult(from_hex(text), None)
    except HexParseError as exc:
        return HexParseResult(None, exc)


# ------------------ ACCESSORS ------------------

def _require_color(color: Any) -> Color:
    if not isinstance(color, Color):
        raise TypeError(f"Expected a Color, got {type(color).__name__}")
    return color


def to_rgba(color: Color) -> RGBA:
    """Return the stored channels unchanged."""
    return _require_color(color).value


def to_hex(color: Color) -> HexColor:
    """
    Encode the RGB channels as lowercase ``#rrggbb``.

    Alpha is never written into the string; it is returned beside it.
    """
    r, g, b, a = _require_color(color).value
    return HexColor(format_hex(r, g, b), a)


def to_format(color: Color, format_type: FormatType = FormatType.FLOAT) -> Tuple[Scalar, ...]:
    """
    Return all four channels scaled to ``format_type``.

    FLOAT is the stored value, INT rounds ``value * 255`` (ties to even),
    PERCENTAGE is ``value * 100``. INT raises ValueError on inf or NaN.
    """
    fmt = FormatType(format_type)
    return tuple(unit_to_format(v, fmt) for v in _require_color(color).value)


def to_rgb255(color: Color) -> Tuple[int, int, int]:
    r, g, b, _ = _require_color(color).value
    return (unit_to_byte(r), unit_to_byte(g), unit_to_byte(b))


def with_alpha(color: Color, alpha: Optional[Scalar] = None) -> Color:
    """
    Return a copy of ``color`` with its alpha replaced.

    Args:
        alpha: New alpha value. If None, the color becomes fully opaque.
    """
    r, g, b, _ = _require_color(color).value
    if alpha is None:
        alpha = DEFAULT_ALPHA
    return Color(r, g, b, alpha)


Color.to_rgba = to_rgba
Color.to_hex = to_hex
Color.to_format = to_format
Color.to_rgb255 = to_rgb255
Color.with_alpha = with_alpha

Color.rgba = staticmethod(rgba)
Color.rgb = staticmethod(rgb)
Color.rgb255 = staticmethod(rgb255)
Color.rgba255 = staticmethod(rgba255)
Color.from_rgba = staticmethod(from_rgba)
Color.from_hex = staticmethod(from_hex)
Color.try_from_hex = staticmethod(try_from_hex)
