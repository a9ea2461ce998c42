import math
from typing import Any
from collections.abc import Sized

from boundednumbers.functions import clamp


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negatives."""
    return int(math.floor(value + 0.5))


def to_channel(value: float, maximum: int = 255) -> int:
    """Round a channel value and clamp it into ``[0, maximum]``."""
    return int(clamp(round_half_up(value), 0, maximum))
