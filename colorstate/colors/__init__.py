"""
colorstate Color Classes
========================

Immutable RGB and HSL value objects and the synchronized :class:`ColorState`.

Usage
-----
>>> from colorstate.colors import ColorState, RGBColor
>>>
>>> state = ColorState(rgb=RGBColor((0, 255, 0)))
>>> state.hsl.hue
120.0
>>> state.set_hsl((0.0, 1.0, 0.5))
>>> tuple(state.rgb)
(255, 0, 0)

Color Classes
-------------
    - RGBColor: Integer RGB (0-255), clamped on construction
    - HSLColor: Float HSL (hue in degrees, saturation/lightness 0.0-1.0), unclamped
    - ColorState: one color held as both, kept in sync

Notes
-----
- Instances of RGBColor and HSLColor are frozen after initialization
- ``to_format`` rescales a color into INT, FLOAT or PERCENTAGE channels
"""

from .color_base import ColorBase
from .rgb import RGBColor, RGB
from .hsl import HSLColor, HSL
from .state import ColorState, ColorConverter, Color

__all__ = [
    'ColorBase',
    'RGBColor',
    'RGB',
    'HSLColor',
    'HSL',
    'ColorState',
    'ColorConverter',
    'Color',
]
