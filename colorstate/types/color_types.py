from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ColorElement = Tuple[Scalar, ...]
ColorSpace = Literal["rgb", "hsl"]
SPACES = {"rgb", "hsl"}

def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: tuple or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.array(element, dtype=float)
