from __future__ import annotations
from typing import Sequence
from ..conversions import rgb8_to_hsl, hsl_to_rgb8
from ..types.color_types import Scalar
from .rgb import RGBColor
from .hsl import HSLColor


class ColorState:
    """
    One color held as both RGB and HSL, kept in sync.

    Setting either representation recomputes the other. The two fields are
    only ever replaced together, so a reader never sees a stale pair.

    Not thread-safe: callers sharing an instance must serialize each get/set
    pair themselves.

    Examples
    --------
    >>> state = ColorState()
    >>> state.set_rgb(RGBColor((255, 0, 0)))
    >>> state.get_hsl()
    HSLColor(0.0, 1.0, 0.5)
    >>> state.set_hsl((240.0, 1.0, 0.5))
    >>> state.get_rgb()
    RGBColor(0, 0, 255)
    """
    __slots__ = ('_rgb', '_hsl')

    def __init__(
        self,
        rgb: RGBColor | Sequence[Scalar] | None = None,
        hsl: HSLColor | Sequence[Scalar] | None = None,
    ) -> None:
        if rgb is not None and hsl is not None:
            raise ValueError("ColorState accepts an initial rgb or hsl, not both")

        self._rgb = RGBColor()
        self._hsl = HSLColor()

        if rgb is not None:
            self.set_rgb(rgb)
        elif hsl is not None:
            self.set_hsl(hsl)

    def set_rgb(self, rgb: RGBColor | Sequence[Scalar]) -> None:
        """Store ``rgb`` and recompute the HSL representation."""
        rgb = RGBColor.coerce(rgb)
        hsl = HSLColor(rgb8_to_hsl(*rgb.value))
        self._rgb, self._hsl = rgb, hsl

    def set_hsl(self, hsl: HSLColor | Sequence[Scalar]) -> None:
        """
        Store ``hsl`` and recompute the RGB representation.

        The HSL value is stored exactly as given. Out-of-range saturation or
        lightness is extrapolated and the resulting channels clamped into
        [0, 255]; hue is wrapped into [0, 360) before sector lookup.
        """
        hsl = HSLColor.coerce(hsl)
        rgb = RGBColor(hsl_to_rgb8(*hsl.value, stacklevel=3))
        self._rgb, self._hsl = rgb, hsl

    def get_rgb(self) -> RGBColor:
        return self._rgb

    def get_hsl(self) -> HSLColor:
        return self._hsl

    @property
    def rgb(self) -> RGBColor:
        return self._rgb

    @property
    def hsl(self) -> HSLColor:
        return self._hsl

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rgb={self._rgb.value!r}, hsl={self._hsl.value!r})"


ColorConverter = ColorState
Color = ColorState
