from __future__ import annotations
from typing import Any, Callable, ClassVar, NamedTuple, Optional, Tuple
from ..types.format_type import FormatType, DEFAULT_TOLERANCE
from ..types.color_types import Scalar, ChannelName, CHANNELS
from ..utils.num_utils import is_close


class RGBA(NamedTuple):
    """Unit-interval channel record, as returned by ``to_rgba``."""
    red: float
    green: float
    blue: float
    alpha: float


class HexColor(NamedTuple):
    """Result of ``to_hex``: the ``#rrggbb`` string plus the alpha it cannot carry."""
    hex: str
    alpha: float


class Color:
    """
    Immutable RGBA color with unit-interval float channels.

    Values are stored exactly as given; nothing is clamped, so out-of-range
    channels survive a round trip untouched. Construct through ``rgba``,
    ``rgb``, ``rgb255``, ``from_rgba`` or ``from_hex`` rather than directly.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes

    channels: ClassVar[Tuple[ChannelName, ...]] = CHANNELS

    # bound in colors/color.py
    to_rgba: Callable[[Color], RGBA]
    to_hex: Callable[[Color], HexColor]
    to_format: Callable[[Color, FormatType], Tuple[Scalar, ...]]
    to_rgb255: Callable[[Color], Tuple[int, int, int]]
    with_alpha: Callable[[Color, Optional[float]], Color]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar) -> None:
        self._value = RGBA(float(red), float(green), float(blue), float(alpha))
        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBA:
        return self._value

    @property
    def red(self) -> float:
        return self._value.red

    @property
    def green(self) -> float:
        return self._value.green

    @property
    def blue(self) -> float:
        return self._value.blue

    @property
    def alpha(self) -> float:
        return self._value.alpha

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Color, self._value))

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"{self.__class__.__name__}(red={r!r}, green={g!r}, blue={b!r}, alpha={a!r})"

    def __reduce__(self):
        return (self.__class__, tuple(self._value))

    def isclose(self, other: Color, tol: float = DEFAULT_TOLERANCE) -> bool:
        """Compare every channel against ``other`` within an absolute tolerance."""
        if not isinstance(other, Color):
            raise TypeError(f"isclose expects a Color, got {type(other).__name__}")
        return all(is_close(a, b, tol) for a, b in zip(self._value, other._value))
