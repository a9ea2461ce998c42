from __future__ import annotations
from enum import Enum
from typing import Tuple

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]

# Maximum of the r, g, b channels on the 8-bit scale
CHANNEL_MAX = 255


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"


# Alpha scale per space; RGB alpha lives on the 8-bit scale, HSL alpha on [0, 1]
alpha_max = {
    ColorSpace.RGB: 255.0,
    ColorSpace.HSL: 1.0,
}
