from .color_normalizer import (
    TARGET_SATURATION,
    TARGET_LIGHTNESS,
    ColorInput,
    as_rgb_color,
    normalize_color,
    np_normalize_colors,
)

__all__ = [
    "TARGET_SATURATION",
    "TARGET_LIGHTNESS",
    "ColorInput",
    "as_rgb_color",
    "normalize_color",
    "np_normalize_colors",
]
