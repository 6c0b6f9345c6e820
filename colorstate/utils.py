from typing import Any
from collections.abc import Sized

RealNumber = int | float

def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1

def clamp01(value: RealNumber) -> float:
    """Clamp a number into the inclusive range ``[0, 1]``."""
    return max(0.0, min(1.0, float(value)))
