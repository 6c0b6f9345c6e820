import warnings
import numpy as np
from numpy import ndarray as NDArray
from ..types.format_type import HUE_360

SECTORS = 6


class HueSectorWarning(UserWarning):
    """Issued when a hue cannot be placed in any of the six 60-degree sectors."""


def normalize_hue(h: float) -> float:
    """
    Normalize hue to [0, 360) range.

    ``h % 360`` can round up to exactly 360.0 for tiny negative inputs, so that
    result is folded back to 0.
    """
    h = h % HUE_360
    return 0.0 if h >= HUE_360 else h

def np_normalize_hue(h: NDArray) -> NDArray:
    """Vectorized :func:`normalize_hue`."""
    h = np.asarray(h, dtype=float) % HUE_360
    return np.where(h >= HUE_360, 0.0, h)

def _to_byte(v: float) -> int:
    # clamp before rounding so infinities and NaN never reach int()
    return int(round(min(255.0, max(0.0, v * 255.0))))

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float, *, stacklevel: int = 2) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]
        stacklevel: Frame a HueSectorWarning is attributed to, as in ``warnings.warn``

    Returns:
        Tuple[float, float, float]: (r, g, b), in [0, 1] for in-range input.
        Saturation and lightness outside [0, 1] are extrapolated, not clamped.
    """
    c = (1 - abs(2 * l - 1)) * s

    h_prime = normalize_hue(h) / 60
    if h_prime >= SECTORS:
        h_prime = 0.0
    x = c * (1 - abs(h_prime % 2 - 1))

    if 0 <= h_prime < 1:
        r, g, b = c, x, 0.0
    elif 1 <= h_prime < 2:
        r, g, b = x, c, 0.0
    elif 2 <= h_prime < 3:
        r, g, b = 0.0, c, x
    elif 3 <= h_prime < 4:
        r, g, b = 0.0, x, c
    elif 4 <= h_prime < 5:
        r, g, b = x, 0.0, c
    elif 5 <= h_prime < 6:
        r, g, b = c, 0.0, x
    else:
        warnings.warn(
            f"hue {h!r} does not fall in any sector; treating as achromatic",
            HueSectorWarning,
            stacklevel=stacklevel,
        )
        r, g, b = 0.0, 0.0, 0.0

    m = l - c / 2
    return r + m, g + m, b + m

def hsl_to_rgb8(h: float, s: float, l: float, *, stacklevel: int = 2) -> tuple[int, int, int]:
    """Convert HSL to 8-bit RGB, rounding and clamping each channel into [0, 255]."""
    r, g, b = hsl_to_unit_rgb(h, s, l, stacklevel=stacklevel + 1)
    return _to_byte(r), _to_byte(g), _to_byte(b)

def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray, *, stacklevel: int = 2) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]
        stacklevel: Frame a HueSectorWarning is attributed to, as in ``warnings.warn``

    Returns:
        rgb: array of shape (..., 3): (r, g, b)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    c = (1 - np.abs(2 * l - 1)) * s

    h_prime = np_normalize_hue(h) / 60
    h_prime = np.where(h_prime >= SECTORS, 0.0, h_prime)
    x = c * (1 - np.abs(h_prime % 2 - 1))

    finite = np.isfinite(h_prime)
    sector = np.where(finite, np.floor(np.where(finite, h_prime, 0.0)), -1).astype(int)
    if not finite.all():
        warnings.warn(
            f"{int((~finite).sum())} hue value(s) do not fall in any sector; treating as achromatic",
            HueSectorWarning,
            stacklevel=stacklevel,
        )

    r = np.zeros(out_shape)
    g = np.zeros(out_shape)
    b = np.zeros(out_shape)

    # (r, g, b) provisional sources per sector: 0 -> zero, 1 -> chroma, 2 -> x
    table = (
        (1, 2, 0),
        (2, 1, 0),
        (0, 1, 2),
        (0, 2, 1),
        (2, 0, 1),
        (1, 0, 2),
    )
    zero = np.zeros(out_shape)
    sources = (zero, c, x)
    for index, (ri, gi, bi) in enumerate(table):
        mask = sector == index
        r[mask] = sources[ri][mask]
        g[mask] = sources[gi][mask]
        b[mask] = sources[bi][mask]

    m = l - c / 2
    return np.stack([r + m, g + m, b + m], axis=-1)

def np_hsl_to_rgb8(hsl: NDArray, *, stacklevel: int = 2) -> NDArray:
    """
    Vectorized: Convert an array of HSL colors (..., 3) to 8-bit RGB (..., 3) as ``uint8``.
    """
    hsl = np.asarray(hsl, dtype=float)
    rgb = np_hsl_to_unit_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2], stacklevel=stacklevel + 1)
    scaled = np.clip(np.round(rgb * 255.0), 0, 255)
    return np.nan_to_num(scaled, nan=0.0).astype(np.uint8)
