"""
Hex color parsing and formatting.

Parsing accepts an optional leading ``#`` followed by 3, 4, 6 or 8 hex digits,
in any case. Formatting always emits the 6-digit lowercase ``#rrggbb`` form;
alpha travels beside the string, never inside it.
"""
from __future__ import annotations
import string
import warnings
from typing import Any, Iterable, List, NamedTuple

import numpy as np

from ..errors import HexParseError
from ..types.format_type import BYTE_MAX, DEFAULT_ALPHA
from ..types.color_types import ByteVector, UnitVector, element_to_array
from .numbers import (
    byte_to_unit,
    byte_in_range,
    unit_to_clamped_byte,
    np_byte_to_unit,
    np_byte_in_range,
    np_unit_to_clamped_byte,
)

HEX_MARKER = "#"
HEX_DIGITS = frozenset(string.hexdigits)


class HexLayout(NamedTuple):
    has_alpha: bool
    digits_per_channel: int


# digit count -> layout
HEX_LAYOUTS: dict[int, HexLayout] = {
    3: HexLayout(has_alpha=False, digits_per_channel=1),
    4: HexLayout(has_alpha=True, digits_per_channel=1),
    6: HexLayout(has_alpha=False, digits_per_channel=2),
    8: HexLayout(has_alpha=True, digits_per_channel=2),
}


def strip_marker(text: str) -> str:
    """Remove a single leading marker character, if present."""
    return text[len(HEX_MARKER):] if text.startswith(HEX_MARKER) else text


def parse_hex_bytes(text: Any) -> ByteVector:
    """
    Resolve a hex color string into its channel bytes.

    Args:
        text: Hex string such as ``"#fa0"``, ``"FFAA00"`` or ``"#ffaa0080"``

    Returns:
        Three bytes (r, g, b) or four bytes (r, g, b, a), each in [0, 255].

    Raises:
        HexParseError: If the input is not a string, has an unsupported digit
            count, or contains a non-hex character.
    """
    if not isinstance(text, str):
        raise HexParseError(text, f"expected str, got {type(text).__name__}")

    digits = strip_marker(text)
    layout = HEX_LAYOUTS.get(len(digits))
    if layout is None:
        expected = ", ".join(str(n) for n in sorted(HEX_LAYOUTS))
        raise HexParseError(text, f"expected {expected} hex digits, got {len(digits)}")

    # int(..., 16) also takes "0x", "_", signs, whitespace and non-ASCII digits
    bad = next((ch for ch in digits if ch not in HEX_DIGITS), None)
    if bad is not None:
        raise HexParseError(text, f"non-hex character {bad!r}")

    width = layout.digits_per_channel
    chunks = [digits[i:i + width] for i in range(0, len(digits), width)]
    if width == 1:
        chunks = [c * 2 for c in chunks]
    return tuple(int(c, 16) for c in chunks)


def parse_hex(text: Any) -> UnitVector:
    """Parse a hex color string into unit-interval (r, g, b, a); alpha defaults to 1.0."""
    channels = [byte_to_unit(b) for b in parse_hex_bytes(text)]
    if len(channels) == 3:
        channels.append(DEFAULT_ALPHA)
    r, g, b, a = channels
    return (r, g, b, a)


def format_hex(red: float, green: float, blue: float) -> str:
    """
    Encode unit-interval RGB channels as ``#rrggbb``.

    Bytes that fall outside [0, 255] are clamped in float space (NaN becomes
    0) and a RuntimeWarning is issued; the caller's values are not modified.
    Ties round to even: 127.5 -> 0x80, 2.5 -> 0x02.
    """
    channels = (red, green, blue)
    clamped = [unit_to_clamped_byte(c) for c in channels]
    if not all(byte_in_range(c) for c in channels):
        warnings.warn(
            f"Channels {(red, green, blue)!r} fall outside the unit interval; "
            f"hex output clamped to {tuple(clamped)!r}",
            RuntimeWarning,
            stacklevel=2,
        )
    return HEX_MARKER + "".join(f"{b:02x}" for b in clamped)


def np_parse_hex(texts: Iterable[str]) -> np.ndarray:
    """
    Parse many hex strings into an ``(N, 4)`` float64 array of unit RGBA.

    Raises:
        HexParseError: For the first malformed entry; the message names its index.
    """
    rows: List[ByteVector] = []
    for index, text in enumerate(texts):
        try:
            values = parse_hex_bytes(text)
        except HexParseError as exc:
            raise HexParseError(text, f"entry {index}: {exc.reason}") from exc
        # BYTE_MAX / 255.0 is exactly DEFAULT_ALPHA
        rows.append(values if len(values) == 4 else values + (BYTE_MAX,))

    if not rows:
        return np.empty((0, 4), dtype=np.float64)
    return np_byte_to_unit(np.array(rows))


def np_format_hex(colors: np.ndarray) -> List[str]:
    """Format an ``(N, 3)`` or ``(N, 4)`` unit array as ``#rrggbb`` strings; alpha is ignored."""
    arr = element_to_array(colors)
    if arr.ndim != 2 or arr.shape[-1] not in (3, 4):
        raise ValueError(f"np_format_hex expects shape (N, 3) or (N, 4), got {arr.shape}")

    clamped = np_unit_to_clamped_byte(arr[:, :3])
    if not np.all(np_byte_in_range(arr[:, :3])):
        warnings.warn(
            "Some channels fall outside the unit interval; hex output clamped",
            RuntimeWarning,
            stacklevel=2,
        )
    return [HEX_MARKER + "".join(f"{int(b):02x}" for b in row) for row in clamped]
