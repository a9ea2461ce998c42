"""
Biome Color - representative color resolution for sampled categories
====================================================================

Picks the dominant category among a set of nearby samples, looks up the
category's color and re-synthesizes it with fixed saturation and lightness,
so every category maps to a consistent, saturated signature color.

Quick Start
-----------
>>> from biome_color import CategorySample, RgbColor, resolve
>>> samples = [CategorySample("grass"), CategorySample("grass"), CategorySample("sand")]
>>> colors = {"grass": RgbColor((40, 90, 20)), "sand": RgbColor((200, 180, 120))}
>>> resolve(samples, colors, fallback=lambda: "grass").to_channels()
(95, 204, 51)

Modules
-------
- conversions: RGB ↔ HSL conversions, scalar and numpy-vectorized
- colors: immutable RgbColor / HslColor values
- normalizers: saturation/lightness pinning
- voting: plurality vote over category samples
- resolver: vote + color lookup + normalization
- host: protocol-typed world sampling and signal encoding
"""

from .colors import ColorBase, RgbColor, HslColor
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    hue_to_channel,
    ColorSpace,
)
from .normalizers import (
    TARGET_SATURATION,
    TARGET_LIGHTNESS,
    normalize_color,
    np_normalize_colors,
)
from .voting import CategorySample, tally, dominant
from .resolver import UnknownCategoryError, resolve
from .host import Signal, biome_color_at, color_signals, sample_from_tile

__version__ = "1.0.0"

__all__ = [
    # color values
    "ColorBase",
    "RgbColor",
    "HslColor",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "hue_to_channel",
    "ColorSpace",
    # normalization
    "TARGET_SATURATION",
    "TARGET_LIGHTNESS",
    "normalize_color",
    "np_normalize_colors",
    # voting and resolution
    "CategorySample",
    "tally",
    "dominant",
    "UnknownCategoryError",
    "resolve",
    # host adapters
    "Signal",
    "biome_color_at",
    "color_signals",
    "sample_from_tile",
    "__version__",
]
