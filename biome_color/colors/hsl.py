from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..conversions import hsl_to_rgb
from .color_base import ColorBase
from .rgb import RgbColor


class HslColor(ColorBase):
    """HSL color; hue is a fraction of a full turn, everything else in [0, 1]."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.HSL
    channel_names: ClassVar[Tuple[str, str, str]] = ("h", "s", "l")

    @property
    def h(self) -> float:
        return self._value[0]

    @property
    def s(self) -> float:
        return self._value[1]

    @property
    def l(self) -> float:
        return self._value[2]

    @property
    def a(self) -> float:
        return self._value[3]

    def to_rgb(self, *, strict: bool = False) -> RgbColor:
        """Convert to ``RgbColor``, rescaling alpha onto [0, 255]."""
        r, g, b, a = hsl_to_rgb(self.h, self.s, self.l, self.a, strict=strict)
        if self.has_alpha:
            return RgbColor((r, g, b, a))
        return RgbColor((r, g, b))
