import math
from typing import Optional
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import CHANNEL_MAX, Scalar
from .numbers import check_channels, check_range

## RGB to HSL conversions

def rgb_to_hsl(
    r: Scalar,
    g: Scalar,
    b: Scalar,
    a: Optional[Scalar] = None,
    *,
    strict: bool = False,
) -> tuple[float, float, float, Scalar]:
    """
    Convert an RGB color to HSL.
    Based on: https://en.wikipedia.org/wiki/HSL_color_space

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]
        a: Alpha in [0, 255]. Passed through unscaled, 255 when omitted.
        strict: Raise ValueError for channels outside [0, 255]

    Returns:
        Tuple[float, float, float, Scalar]: (hue [0, 1), saturation [0, 1],
        lightness [0, 1], alpha)
        Out-of-range channels that land lightness on exactly 0 or 1 give an
        infinite saturation instead of raising.
    """
    if strict:
        check_channels("rgb", (r, g, b), CHANNEL_MAX)
        if a is not None:
            check_range("a", a, CHANNEL_MAX)

    r, g, b = r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX

    max_c = max(r, g, b)
    min_c = min(r, g, b)

    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        # achromatic
        hue, saturation = 0.0, 0.0
    else:
        delta = max_c - min_c
        if lightness > 0.5:
            denominator = 2 - max_c - min_c
        else:
            denominator = max_c + min_c
        # Out-of-range channels can zero the denominator; follow IEEE like numpy
        if denominator:
            saturation = delta / denominator
        else:
            saturation = math.copysign(math.inf, denominator)

        if max_c == r:
            hue = (g - b) / delta
            if g < b:
                hue += 6
        elif max_c == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
        hue /= 6

    return hue, saturation, lightness, a if a is not None else CHANNEL_MAX


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0, 1), saturation [0, 1], lightness [0, 1])
    """
    r = np.asarray(r, dtype=float) / CHANNEL_MAX
    g = np.asarray(g, dtype=float) / CHANNEL_MAX
    b = np.asarray(b, dtype=float) / CHANNEL_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    chromatic = delta > 0
    bright = chromatic & (lightness > 0.5)
    dark = chromatic & ~(lightness > 0.5)

    saturation = np.zeros(out_shape)
    with np.errstate(divide="ignore"):
        saturation[bright] = delta[bright] / (2 - max_c[bright] - min_c[bright])
        saturation[dark] = delta[dark] / (max_c[dark] + min_c[dark])

    # Sector masks are taken in r, g, b priority order like the scalar branch
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue = np.zeros(out_shape)
    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r]
    hue[mask_r & (g < b)] += 6
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    hue /= 6

    return np.stack([hue, saturation, lightness], axis=-1)
