"""
Color Array Module
==================

Vectorized batches of RGBA colors backed by a single ``(N, 4)`` float64 array.

Features
--------
- Same storage rules as Color: channels kept verbatim, never clamped
- Read-only backing array (copied on construction)
- Batch hex parsing and formatting through the numpy conversion path
- Indexing returns plain Color values

Classes
-------
ColorArray: Immutable batch of unit RGBA colors
"""

from numpy import ndarray as NDArray
import numpy as np
from typing import Iterable, Iterator, List, Sequence, Union
from .colors.color_base import Color, HexColor
from .conversions import np_parse_hex, np_format_hex
from .types.format_type import DEFAULT_ALPHA
from .types.color_types import element_to_array


class ColorArray:
    """
    Immutable batch of RGBA colors.

    Accepts an ``(N, 4)`` array of unit RGBA, or ``(N, 3)`` unit RGB in which
    case alpha is filled with 1.0.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Union[NDArray, Sequence]) -> None:
        arr = element_to_array(value)

        if arr.ndim != 2 or arr.shape[-1] not in (3, 4):
            raise ValueError(
                f"ColorArray expects shape (N, 3) or (N, 4), got {arr.shape}"
            )

        if arr.shape[-1] == 3:
            alpha = np.full(arr.shape[:-1] + (1,), DEFAULT_ALPHA, dtype=np.float64)
            arr = np.concatenate([arr, alpha], axis=-1)
        else:
            arr = arr.copy()

        arr.setflags(write=False)
        self._value = arr

    @classmethod
    def from_hex(cls, texts: Iterable[str]) -> 'ColorArray':
        """Parse many hex strings at once; raises HexParseError on the first bad entry."""
        return cls(np_parse_hex(texts))

    @classmethod
    def from_colors(cls, colors: Iterable[Color]) -> 'ColorArray':
        rows = []
        for color in colors:
            if not isinstance(color, Color):
                raise TypeError(f"ColorArray.from_colors expects Color items, got {type(color).__name__}")
            rows.append(color.value)
        if not rows:
            return cls(np.empty((0, 4), dtype=np.float64))
        return cls(np.array(rows, dtype=np.float64))

    @property
    def value(self) -> NDArray:
        return self._value

    @property
    def alpha(self) -> NDArray:
        return self._value[..., -1]

    def to_rgba(self) -> NDArray:
        """Return the read-only ``(N, 4)`` channel array."""
        return self._value

    def to_hex(self) -> List[HexColor]:
        """Format every color as ``#rrggbb`` with its alpha alongside."""
        hexes = np_format_hex(self._value)
        return [HexColor(h, float(a)) for h, a in zip(hexes, self._value[:, 3])]

    def __array__(self, dtype=None, copy=None) -> NDArray:
        """Enable numpy array interface."""
        if dtype is None and not copy:
            return self._value
        return self._value.astype(dtype if dtype is not None else self._value.dtype)

    def __len__(self) -> int:
        return self._value.shape[0]

    def __getitem__(self, index: int) -> Color:
        if not isinstance(index, (int, np.integer)):
            raise TypeError(f"ColorArray indices must be integers, got {type(index).__name__}")
        n = len(self)
        if not -n <= index < n:
            raise IndexError(f"ColorArray index {index} out of range for length {n}")
        return Color(*(float(v) for v in self._value[index]))

    def __iter__(self) -> Iterator[Color]:
        for row in self._value:
            yield Color(*(float(v) for v in row))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorArray):
            return NotImplemented
        return self._value.shape == other._value.shape and bool(np.array_equal(self._value, other._value))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ColorArray(n={len(self)})"
