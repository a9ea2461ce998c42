"""Pin saturation and lightness of a color while keeping its hue."""

from typing import Mapping, Union
import numpy as np

from ..colors import RgbColor
from ..conversions import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb
from ..types.color_types import Scalar

TARGET_SATURATION = 0.6
TARGET_LIGHTNESS = 0.5

ColorInput = Union[RgbColor, Mapping[str, Scalar], tuple]


def as_rgb_color(color: ColorInput) -> RgbColor:
    if isinstance(color, RgbColor):
        return color
    if isinstance(color, Mapping):
        return RgbColor.from_mapping(color)
    if isinstance(color, (tuple, list)):
        return RgbColor(tuple(color))
    raise TypeError(f"Unsupported color input type: {type(color).__name__}")


def normalize_color(
    color: ColorInput,
    saturation: float = TARGET_SATURATION,
    lightness: float = TARGET_LIGHTNESS,
) -> RgbColor:
    """
    Re-synthesize ``color`` with its own hue but fixed saturation and lightness.

    Alpha is discarded; the result is an unrounded three-channel ``RgbColor``.
    Achromatic inputs have hue 0 and therefore come out red.
    """
    color = as_rgb_color(color)
    h, _, _, _ = rgb_to_hsl(color.r, color.g, color.b)
    r, g, b, _ = hsl_to_rgb(h, saturation, lightness)
    return RgbColor((r, g, b))


def np_normalize_colors(
    colors: np.ndarray,
    saturation: float = TARGET_SATURATION,
    lightness: float = TARGET_LIGHTNESS,
) -> np.ndarray:
    """Vectorized ``normalize_color`` over an (..., 3) or (..., 4) array; alpha is dropped."""
    colors = np.asarray(colors, dtype=float)
    if colors.shape[-1] not in (3, 4):
        raise ValueError(f"Expected last dimension of 3 or 4, got shape {colors.shape}")
    hsl = np_rgb_to_hsl(colors[..., 0], colors[..., 1], colors[..., 2])
    return np_hsl_to_rgb(hsl[..., 0], saturation, lightness)
