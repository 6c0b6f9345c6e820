"""
colorstate - Synchronized RGB/HSL Color Values
==============================================

A small library that keeps one color as both 8-bit RGB and HSL, recomputing
one representation whenever the other is set.

Key Features
------------
- ColorState holding an RGB and an HSL value that never go stale
- Immutable RGBColor / HSLColor value objects
- Scalar and vectorized (numpy) RGB ↔ HSL conversions
- Format handling for INT (0-255), FLOAT (0-1) and PERCENTAGE (0-100)
- Explicit ping-pong animation state for frame-driven callers

Quick Start
-----------
>>> from colorstate import ColorState, RGBColor
>>>
>>> state = ColorState()
>>> state.set_rgb(RGBColor((0, 0, 255)))
>>> state.get_hsl()
HSLColor(240.0, 1.0, 0.5)
"""

from .colors import (
    ColorBase,
    RGBColor,
    RGB,
    HSLColor,
    HSL,
    ColorState,
    ColorConverter,
    Color,
)
from .conversions import (
    HueSectorWarning,
    normalize_hue,
    np_normalize_hue,
    unit_rgb_to_hsl,
    rgb8_to_hsl,
    np_unit_rgb_to_hsl,
    np_rgb8_to_hsl,
    hsl_to_unit_rgb,
    hsl_to_rgb8,
    np_hsl_to_unit_rgb,
    np_hsl_to_rgb8,
    convert,
    np_convert,
)
from .types.format_type import FormatType
from .animation import Direction, PingPong, LightnessPulse, UPDATE_INTERVAL

__all__ = [
    # color types
    "ColorBase",
    "RGBColor",
    "RGB",
    "HSLColor",
    "HSL",
    "ColorState",
    "ColorConverter",
    "Color",
    "FormatType",
    # conversions
    "HueSectorWarning",
    "normalize_hue",
    "np_normalize_hue",
    "unit_rgb_to_hsl",
    "rgb8_to_hsl",
    "np_unit_rgb_to_hsl",
    "np_rgb8_to_hsl",
    "hsl_to_unit_rgb",
    "hsl_to_rgb8",
    "np_hsl_to_unit_rgb",
    "np_hsl_to_rgb8",
    "convert",
    "np_convert",
    # animation
    "Direction",
    "PingPong",
    "LightnessPulse",
    "UPDATE_INTERVAL",
]
