import numpy as np
from typing import Callable, cast

from ..types.format_type import FormatType, max_non_hue, HUE_360
from ..types.color_types import ColorElement, ColorSpace, SPACES, element_to_array

from .to_rgb import np_hsl_to_unit_rgb
from .to_hsl import np_unit_rgb_to_hsl

CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsl"): np_unit_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_unit_rgb,
}

def _check_space(space: str) -> str:
    space = space.lower()
    if space not in SPACES:
        raise ValueError(f"Unknown space: {space}")
    return space

def normalize(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        return color / maxval

    if space == "hsl":
        h = color[..., 0]
        s = color[..., 1] / maxval
        l = color[..., 2] / maxval
        return np.stack([h, s, l], axis=-1)

    raise ValueError(f"Unknown space: {space}")

def scale(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        scaled = color * maxval
        return np.round(scaled).astype(int) if fmt == FormatType.INT else scaled

    if space == "hsl":
        h = color[..., 0]
        s = color[..., 1] * maxval
        l = color[..., 2] * maxval

        if fmt == FormatType.INT:
            return np.stack([np.round(h) % HUE_360, np.round(s), np.round(l)], axis=-1).astype(int)

        return np.stack([h, s, l], axis=-1)

    raise ValueError(f"Unknown space: {space}")

def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    if color.shape[-1] != 3:
        raise ValueError(f"Expected 3 channels, got shape {color.shape}")

    # normalize → convert → scale
    base_norm = normalize(color, from_space, input_fmt)

    if from_space == to_space:
        converted = base_norm
    else:
        converted = CONVERT_NUMPY[(from_space, to_space)](
            base_norm[..., 0],
            base_norm[..., 1],
            base_norm[..., 2],
        )

    return scale(converted, to_space, output_fmt)


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space:   ColorSpace,
    input_type:  FormatType=FormatType.INT,
    output_type: FormatType=FormatType.INT,
 ) -> ColorElement:
    """
    Convert a single color tuple between ``"rgb"`` and ``"hsl"`` in any format pair.

    Hue is always in degrees; the other channels are scaled by the format's
    maximum (255, 1.0 or 100.0).
    """
    from_space = _check_space(from_space)  # type: ignore[assignment]
    to_space = _check_space(to_space)  # type: ignore[assignment]
    if from_space == to_space and input_type == output_type:
        return color  # No conversion needed
    result = _convert_core(
        element_to_array(color),
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
    )
    return cast(ColorElement, tuple(v.item() for v in result.flat))

def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space:   ColorSpace,
    input_type:  FormatType=FormatType.INT,
    output_type: FormatType=FormatType.INT,
) -> np.ndarray:
    """Vectorized :func:`convert` for arrays shaped (..., 3)."""
    from_space = _check_space(from_space)  # type: ignore[assignment]
    to_space = _check_space(to_space)  # type: ignore[assignment]
    if from_space == to_space and input_type == output_type:
        return color  # No conversion needed
    return _convert_core(
        np.asarray(color, dtype=float),
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
    )
