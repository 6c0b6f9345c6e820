from .format_type import FormatType, max_non_hue, HUE_360
from .color_types import Scalar, ColorSpace, ColorElement, SPACES, element_to_array

__all__ = [
    "FormatType",
    "max_non_hue",
    "HUE_360",
    "Scalar",
    "ColorSpace",
    "ColorElement",
    "SPACES",
    "element_to_array",
]
