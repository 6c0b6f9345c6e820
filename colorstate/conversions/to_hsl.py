import numpy as np
from numpy import ndarray as NDArray
from ..utils import clamp01
from .to_rgb import normalize_hue, np_normalize_hue

RGB8_MAX = 255.0

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    When two channels share the maximum, red is checked before green and green
    before blue, so red wins ties with green and green wins ties with blue.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    # Hue
    if delta == 0:
        hue = 0.0
    elif max_c == r:
        hue = 60 * (((g - b) / delta) % 6)
    elif max_c == g:
        hue = 60 * ((b - r) / delta + 2)
    else:
        hue = 60 * ((r - g) / delta + 4)

    # Lightness
    lightness = (max_c + min_c) / 2.0

    # Saturation: black and white have no chroma and would divide by zero
    if lightness == 0.0 or lightness == 1.0:
        saturation = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))

    return normalize_hue(hue), clamp01(saturation), clamp01(lightness)

def rgb8_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert 8-bit RGB channels (0-255) to HSL."""
    return unit_rgb_to_hsl(r / RGB8_MAX, g / RGB8_MAX, b / RGB8_MAX)

def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Follows the same tie-break and boundary rules as :func:`unit_rgb_to_hsl`.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    delta = max_c - min_c

    # Hue; masks are exclusive so that red beats green beats blue on ties
    hue = np.zeros(out_shape)
    chromatic = delta > 0
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue[mask_r] = 60 * (((g[mask_r] - b[mask_r]) / delta[mask_r]) % 6)
    hue[mask_g] = 60 * ((b[mask_g] - r[mask_g]) / delta[mask_g] + 2)
    hue[mask_b] = 60 * ((r[mask_b] - g[mask_b]) / delta[mask_b] + 4)

    # Lightness
    lightness = (max_c + min_c) / 2.0

    # Saturation
    saturation = np.zeros(out_shape)
    mask_s = (lightness > 0.0) & (lightness < 1.0)
    saturation[mask_s] = delta[mask_s] / (1 - np.abs(2 * lightness[mask_s] - 1))

    return np.stack(
        [np_normalize_hue(hue), np.clip(saturation, 0.0, 1.0), np.clip(lightness, 0.0, 1.0)],
        axis=-1,
    )

def np_rgb8_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert an array of 8-bit RGB colors (..., 3) to HSL (..., 3).
    """
    rgb = np.asarray(rgb, dtype=float) / RGB8_MAX
    return np_unit_rgb_to_hsl(rgb[..., 0], rgb[..., 1], rgb[..., 2])
