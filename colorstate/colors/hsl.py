from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class HSLColor(ColorBase):
    """
    HSL color: hue in degrees, saturation and lightness as fractions.

    Values are stored as given (no clamping) so that out-of-range input can be
    extrapolated by the converter.
    """
    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace] = "hsl"
    _type:       ClassVar[type] = float
    maxima:      ClassVar[None] = None
    null_value:  ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def lightness(self) -> float:
        return self._value[2]


HSL = HSLColor
