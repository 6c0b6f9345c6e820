from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class RGBColor(ColorBase):
    """
    8-bit RGB color. Channels are coerced to ``int`` and clamped into [0, 255].

    >>> RGBColor((255, 128, 0)).green
    128
    """
    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace] = "rgb"
    _type:       ClassVar[type] = int
    maxima:      ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value:  ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    format_type: ClassVar[FormatType] = FormatType.INT

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]


RGB = RGBColor
