from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ByteVector = Tuple[int, ...]
UnitVector = Tuple[float, float, float, float]
ChannelName = Literal["red", "green", "blue", "alpha"]
CHANNELS: Tuple[ChannelName, ...] = ("red", "green", "blue", "alpha")
ArrayLike = Union[ndarray, ScalarVector]


def element_to_array(element: ArrayLike) -> np.ndarray:
    """
    Convert a color element to a float64 numpy array.

    Args:
        element: Tuple of channel values or an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    return np.asarray(element, dtype=np.float64)
