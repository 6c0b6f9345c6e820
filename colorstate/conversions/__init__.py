"""
colorstate Color Space Conversions
==================================

RGB ↔ HSL conversion utilities with both scalar and vectorized (numpy)
implementations.

Conversion Functions
-------------------

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
        Scalar conversion of unit floats
    rgb8_to_hsl(r, g, b)
        Scalar conversion of 8-bit channels
    np_unit_rgb_to_hsl(r, g, b)
        Vectorized conversion of unit floats
    np_rgb8_to_hsl(rgb)
        Vectorized conversion of an (..., 3) array of 8-bit channels

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
        Scalar conversion to unit floats
    hsl_to_rgb8(h, s, l)
        Scalar conversion to rounded, clamped 8-bit channels
    np_hsl_to_unit_rgb(h, s, l)
        Vectorized conversion to unit floats
    np_hsl_to_rgb8(hsl)
        Vectorized conversion to a ``uint8`` (..., 3) array

High-Level API
-------------
    convert(color, from_space, to_space, input_type, output_type)
        Converter with format handling (INT, FLOAT, PERCENTAGE)
    np_convert(color, from_space, to_space, input_type, output_type)
        Vectorized converter

Examples
--------
>>> from colorstate.conversions import rgb8_to_hsl, hsl_to_rgb8
>>> rgb8_to_hsl(0, 255, 0)
(120.0, 1.0, 0.5)
>>> hsl_to_rgb8(240.0, 1.0, 0.5)
(0, 0, 255)
"""

# RGB → HSL conversions
from .to_hsl import (
    unit_rgb_to_hsl,
    rgb8_to_hsl,
    np_unit_rgb_to_hsl,
    np_rgb8_to_hsl,
)

# HSL → RGB conversions
from .to_rgb import (
    HueSectorWarning,
    normalize_hue,
    np_normalize_hue,
    hsl_to_unit_rgb,
    hsl_to_rgb8,
    np_hsl_to_unit_rgb,
    np_hsl_to_rgb8,
)

# High-level API
from .wrapper import convert, np_convert

# Types and enums
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    # RGB → HSL
    'unit_rgb_to_hsl',
    'rgb8_to_hsl',
    'np_unit_rgb_to_hsl',
    'np_rgb8_to_hsl',

    # HSL → RGB
    'HueSectorWarning',
    'normalize_hue',
    'np_normalize_hue',
    'hsl_to_unit_rgb',
    'hsl_to_rgb8',
    'np_hsl_to_unit_rgb',
    'np_hsl_to_rgb8',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'FormatType',
    'ColorSpace',
]
