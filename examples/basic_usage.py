"""Basic colorstate usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from colorstate import (
    ColorState,
    HSLColor,
    LightnessPulse,
    RGBColor,
    np_hsl_to_rgb8,
)
from colorstate.types.format_type import FormatType


def demonstrate_state() -> None:
    # One color, two synchronized representations.
    state = ColorState()
    state.set_rgb(RGBColor((255, 128, 64)))
    print("RGB -> HSL:", state.get_hsl())
    print("HSL as percentages:", state.get_hsl().to_format(FormatType.PERCENTAGE))

    state.set_hsl(HSLColor((200.0, 0.6, 0.4)))
    print("HSL -> RGB:", state.get_rgb())


def demonstrate_arrays() -> None:
    # A full hue wheel at once.
    hues = np.linspace(0.0, 360.0, 12, endpoint=False)
    wheel = np.column_stack([hues, np.ones_like(hues), np.full_like(hues, 0.5)])
    print("Hue wheel (uint8):", np_hsl_to_rgb8(wheel).tolist())


def demonstrate_animation() -> None:
    # Feed frame deltas in seconds, get the color for each frame.
    pulse = LightnessPulse(hue=30.0, saturation=0.9)
    for _ in range(5):
        print("frame color:", pulse.tick(1.0))


if __name__ == "__main__":
    demonstrate_state()
    demonstrate_arrays()
    demonstrate_animation()
