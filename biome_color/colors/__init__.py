from .color_base import ColorBase
from .rgb import RgbColor
from .hsl import HslColor

__all__ = [
    "ColorBase",
    "RgbColor",
    "HslColor",
]
