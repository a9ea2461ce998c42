from typing import Optional
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import CHANNEL_MAX, Scalar
from .numbers import check_channels, check_range

ONE_THIRD = 1 / 3
ONE_SIXTH = 1 / 6
TWO_THIRDS = 2 / 3


def hue_to_channel(p: float, q: float, t: float) -> float:
    """
    Evaluate one RGB channel of an HSL color at hue offset ``t``.

    ``t`` is wrapped back into [0, 1] by a single step, which covers the
    ±1/3 offsets used by ``hsl_to_rgb``.
    """
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < ONE_SIXTH:
        return p + (q - p) * 6 * t
    if t < 0.5:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * 6
    return p


## HSL to RGB conversions

def hsl_to_rgb(
    h: Scalar,
    s: Scalar,
    l: Scalar,
    a: Optional[Scalar] = None,
    *,
    strict: bool = False,
) -> tuple[float, float, float, float]:
    """
    Convert an HSL color to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_color_space

    Args:
        h: Hue as a fraction of a full turn, [0, 1]
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]
        a: Alpha in [0, 1], 1 when omitted
        strict: Raise ValueError for channels outside [0, 1]

    Returns:
        Tuple[float, float, float, float]: (r, g, b, a) in [0, 255], unrounded
    """
    if strict:
        check_channels("hsl", (h, s, l), 1.0)
        if a is not None:
            check_range("a", a, 1.0)

    if s == 0:
        # achromatic
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q

        r = hue_to_channel(p, q, h + ONE_THIRD)
        g = hue_to_channel(p, q, h)
        b = hue_to_channel(p, q, h - ONE_THIRD)

    if a is None:
        a = 1

    return r * CHANNEL_MAX, g * CHANNEL_MAX, b * CHANNEL_MAX, a * CHANNEL_MAX


def np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    """Vectorized ``hue_to_channel``."""
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < ONE_SIXTH, t < 0.5, t < TWO_THIRDS],
        [p + (q - p) * 6 * t, q, p + (q - p) * (TWO_THIRDS - t) * 6],
        default=p,
    )


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in [0, 1]
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255], unrounded
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    achromatic = s == 0
    r = np.where(achromatic, l, np_hue_to_channel(p, q, h + ONE_THIRD))
    g = np.where(achromatic, l, np_hue_to_channel(p, q, h))
    b = np.where(achromatic, l, np_hue_to_channel(p, q, h - ONE_THIRD))

    return np.stack([r, g, b], axis=-1) * CHANNEL_MAX
