from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Mapping, Tuple
from ..types.color_types import ColorSpace, CHANNEL_MAX, Scalar
from ..conversions import rgb_to_hsl
from ..utils import round_half_up, to_channel
from .color_base import ColorBase

if TYPE_CHECKING:
    from .hsl import HslColor


class RgbColor(ColorBase):
    """RGB color with channels and alpha on the 8-bit scale [0, 255]."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.RGB
    channel_names: ClassVar[Tuple[str, str, str]] = ("r", "g", "b")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Scalar]) -> RgbColor:
        """Build from a ``{"r": ..., "g": ..., "b": ...}`` mapping, ``"a"`` optional."""
        channels = (mapping["r"], mapping["g"], mapping["b"])
        if "a" in mapping:
            channels += (mapping["a"],)
        return cls(channels)

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @property
    def a(self) -> float:
        return self._value[3]

    def to_hsl(self, *, strict: bool = False) -> HslColor:
        """Convert to ``HslColor``, rescaling alpha onto [0, 1]."""
        from .hsl import HslColor

        h, s, l, _ = rgb_to_hsl(self.r, self.g, self.b, strict=strict)
        if self.has_alpha:
            return HslColor((h, s, l, self.a / CHANNEL_MAX))
        return HslColor((h, s, l))

    def rounded(self) -> RgbColor:
        """Round every channel half-up to the nearest integer, no clamping."""
        return self.__class__(tuple(round_half_up(v) for v in self))

    def to_channels(self) -> Tuple[int, ...]:
        """Display-ready integer channels, rounded and clamped into [0, 255]."""
        return tuple(to_channel(v, CHANNEL_MAX) for v in self)

    def as_dict(self) -> dict[str, float]:
        names = self.channel_names + ("a",) if self.has_alpha else self.channel_names
        return dict(zip(names, self))
