import math
import numpy as np
from ..types.format_type import FormatType, BYTE_MAX, BYTE_DTYPE, format_maxima
from ..types.color_types import Scalar

# Rounding is Python's round / np.round: ties go to the even integer,
# so 0.5 -> 0, 2.5 -> 2, 127.5 -> 128.


def byte_to_unit(value: Scalar) -> float:
    """Map an 8-bit channel value onto the unit interval. Out-of-range input is scaled, not clamped."""
    return value / float(BYTE_MAX)


def unit_to_byte(value: float) -> int:
    """
    Map a unit-interval channel value to its nearest 8-bit integer.

    Out-of-range values are scaled but not clamped.

    Raises:
        ValueError: If ``value`` is infinite or NaN.
    """
    scaled = value * BYTE_MAX
    if not math.isfinite(scaled):
        raise ValueError(f"Cannot convert non-finite channel {value!r} to a byte")
    return int(round(scaled))


def byte_in_range(value: float) -> bool:
    """True when ``value`` maps to a byte in [0, 255] without clamping."""
    scaled = value * BYTE_MAX
    return math.isfinite(scaled) and 0 <= round(scaled) <= BYTE_MAX


def unit_to_clamped_byte(value: float) -> int:
    """
    Map a channel value to a byte, clamping in float space first.

    Total over all floats: +inf maps to 255, -inf and NaN map to 0.
    """
    scaled = value * BYTE_MAX
    if math.isnan(scaled):
        return 0
    return int(round(min(max(scaled, 0.0), float(BYTE_MAX))))


def unit_to_format(value: float, fmt: FormatType) -> Scalar:
    if fmt == FormatType.INT:
        return unit_to_byte(value)
    return value * format_maxima[fmt]


def format_to_unit(value: Scalar, fmt: FormatType) -> float:
    return value / float(format_maxima[fmt])


def np_byte_to_unit(values: np.ndarray) -> np.ndarray:
    return np.asarray(values, dtype=np.float64) / float(BYTE_MAX)


def np_unit_to_byte(values: np.ndarray) -> np.ndarray:
    """Vectorized ``unit_to_byte`` for finite input."""
    scaled = np.asarray(values, dtype=np.float64) * BYTE_MAX
    return np.round(scaled).astype(BYTE_DTYPE)


def np_byte_in_range(values: np.ndarray) -> np.ndarray:
    with np.errstate(over="ignore", invalid="ignore"):
        rounded = np.round(np.asarray(values, dtype=np.float64) * BYTE_MAX)
        return np.isfinite(rounded) & (rounded >= 0) & (rounded <= BYTE_MAX)


def np_unit_to_clamped_byte(values: np.ndarray) -> np.ndarray:
    """Vectorized ``unit_to_clamped_byte``; clamps before the integer cast so huge values cannot wrap."""
    with np.errstate(over="ignore"):
        scaled = np.asarray(values, dtype=np.float64) * BYTE_MAX
    scaled = np.where(np.isnan(scaled), 0.0, scaled)
    return np.round(np.clip(scaled, 0.0, float(BYTE_MAX))).astype(BYTE_DTYPE)
