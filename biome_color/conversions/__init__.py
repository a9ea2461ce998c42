"""
Biome Color Space Conversions
=============================

RGB ↔ HSL conversion with scalar and vectorized (numpy) implementations.

RGB channels are on the 8-bit scale [0, 255]; HSL channels, hue included,
are on the unit interval (hue is a fraction of a full turn).

Conversion Functions
-------------------

RGB → HSL:
    rgb_to_hsl(r, g, b, a=None, strict=False)
        Scalar conversion. Alpha is passed through unscaled and defaults to 255.
    np_rgb_to_hsl(r, g, b)
        Vectorized conversion, returns (..., 3)

HSL → RGB:
    hsl_to_rgb(h, s, l, a=None, strict=False)
        Scalar conversion. Alpha defaults to 1 and is scaled by 255 with
        the other channels.
    np_hsl_to_rgb(h, s, l)
        Vectorized conversion, returns (..., 3)

Alpha Defaults
--------------
The two scalar directions default alpha on different scales (255 for
``rgb_to_hsl``, 1 for ``hsl_to_rgb``). Feeding the output of one straight
into the other therefore rescales an omitted alpha. The ``RgbColor`` and
``HslColor`` value objects convert alpha between scales properly; use them
when alpha matters.

Examples
--------
>>> from biome_color.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(255, 0, 0)
(0.0, 1.0, 0.5, 255)
>>> tuple(round(c) for c in hsl_to_rgb(0.0, 0.6, 0.5))
(204, 51, 51, 255)
"""

from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_rgb import hsl_to_rgb, np_hsl_to_rgb, hue_to_channel, np_hue_to_channel

from ..types.color_types import ColorSpace

__all__ = [
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'hsl_to_rgb',
    'np_hsl_to_rgb',
    'hue_to_channel',
    'np_hue_to_channel',
    'ColorSpace',
]
