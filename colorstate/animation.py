"""
Explicit animation state for callers that drive a color once per frame.

The render loop owns timing; it passes the elapsed seconds to
:meth:`PingPong.advance` or :meth:`LightnessPulse.tick` and uses the result.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum

from .colors import ColorState, HSLColor, RGBColor

log = logging.getLogger(__name__)

UPDATE_INTERVAL = 200.0  # ms


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"


@dataclass
class PingPong:
    """
    A value bouncing between 0 and 1.

    ``rate`` is in units per second; at each end the position is clamped and
    the direction reversed.
    """
    position: float = 0.0
    direction: Direction = Direction.UP
    rate: float = UPDATE_INTERVAL / 1000

    def advance(self, delta_time: float) -> float:
        if delta_time < 0:
            raise ValueError(f"delta_time must be non-negative, got {delta_time}")

        step = self.rate * delta_time
        if self.direction is Direction.UP:
            self.position += step
        else:
            self.position -= step

        if self.position >= 1.0:
            self.position = 1.0
            self._turn(Direction.DOWN)
        elif self.position <= 0.0:
            self.position = 0.0
            self._turn(Direction.UP)
        return self.position

    def _turn(self, direction: Direction) -> None:
        if direction is not self.direction:
            log.debug("ping-pong turned %s at %.3f", direction.value, self.position)
        self.direction = direction

    @property
    def channel(self) -> int:
        """Current position as an 8-bit channel value."""
        return int(self.position * 255.999)


@dataclass
class LightnessPulse:
    """Pulse the lightness of a fixed hue and saturation between black and white."""
    hue: float
    saturation: float
    wave: PingPong = field(default_factory=PingPong)
    state: ColorState = field(default_factory=ColorState)

    def tick(self, delta_time: float) -> RGBColor:
        lightness = self.wave.advance(delta_time)
        self.state.set_hsl(HSLColor((self.hue, self.saturation, lightness)))
        return self.state.get_rgb()
