from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast
from ..types.color_types import ColorSpace, Scalar, ScalarVector, alpha_max
from ..utils import get_dimension


class ColorBase:
    """
    Immutable color value: three channels plus an alpha channel.

    ``value`` always holds four floats. When constructed from three
    channels the alpha defaults to the maximum of the color space and
    ``has_alpha`` reports ``False``.

    Values are not clamped; out-of-range channels are carried as given.
    """
    __slots__ = ('_value', '_has_alpha', '_is_frozen')  # prevents adding new attributes → immutability

    mode:          ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, str, str]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ScalarVector) -> None:
        if isinstance(value, ColorBase) and value.mode == self.mode:
            value = tuple(value)
        elif isinstance(value, ColorBase):
            raise TypeError(
                f"{self.__class__.__name__} cannot be built from {value.__class__.__name__}; "
                f"use to_rgb()/to_hsl()"
            )
        value_dim = get_dimension(value)
        if value_dim not in (3, 4):
            raise ValueError(f"{self.mode.value} expects 3 or 4 channels, got {value_dim}")

        channels = tuple(float(v) for v in cast(Tuple[Any, ...], value))
        has_alpha = value_dim == 4
        if not has_alpha:
            channels += (alpha_max[self.mode],)

        # safe assignment; __setattr__ still allows it during init
        self._value = channels
        self._has_alpha = has_alpha

        # freeze instance — no more writes allowed
        object.__setattr__(self, '_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, float, float, float]:
        return cast(Tuple[float, float, float, float], self._value)

    @property
    def channels(self) -> Tuple[float, float, float]:
        """The three color channels without alpha."""
        return cast(Tuple[float, float, float], self._value[:3])

    @property
    def alpha(self) -> float:
        return self._value[3]

    @property
    def has_alpha(self) -> bool:
        """Whether alpha was given explicitly rather than defaulted."""
        return self._has_alpha

    def with_alpha(self, alpha: Scalar):
        return self.__class__(self.channels + (alpha,))

    def without_alpha(self):
        return self.__class__(self.channels)

    def __iter__(self):
        return iter(self._value if self._has_alpha else self.channels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase) or other.mode != self.mode:
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={v:g}" for name, v in zip(self.channel_names + ("a",), self._value)
        )
        return f"{self.__class__.__name__}({fields})"
