"""
Adapters between a host world and the biome color resolver.

The host is described only by the ``Tile`` and ``Surface`` protocols, so any
object exposing the right attributes can be sampled. ``color_signals``
encodes a resolved color into ordered numeric output slots.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Tuple

from .colors import RgbColor
from .resolver import CategoryColors, resolve
from .voting import CategorySample

logger = logging.getLogger(__name__)

Position = Tuple[float, float]

SAMPLE_RADIUS = 2
COLOR_SIGNALS = ("signal-red", "signal-green", "signal-blue")


class Tile(Protocol):
    name: str
    hidden_tile: Optional[str]
    double_hidden_tile: Optional[str]
    valid: bool


class Surface(Protocol):
    def find_tiles(self, position: Position, radius: float) -> Iterable[Tile]: ...

    def tile_at(self, position: Position) -> Tile: ...


@dataclass(frozen=True)
class Signal:
    slot: int
    name: str
    value: int


def sample_from_tile(tile: Tile) -> CategorySample:
    return CategorySample(
        name=tile.name,
        hidden=tile.hidden_tile,
        double_hidden=tile.double_hidden_tile,
        valid=tile.valid,
    )


def biome_color_at(
    surface: Surface,
    position: Position,
    category_colors: CategoryColors,
    radius: float = SAMPLE_RADIUS,
) -> RgbColor:
    """
    Resolve the normalized color of the dominant tile around ``position``.

    Tiles within ``radius`` vote; when none of them is valid the tile
    directly under ``position`` is used, by its plain name.
    """
    samples = [sample_from_tile(tile) for tile in surface.find_tiles(position, radius)]
    logger.debug("Sampled %d tiles around %r", len(samples), position)
    return resolve(samples, category_colors, lambda: surface.tile_at(position).name)


def color_signals(
    color: RgbColor,
    names: Tuple[str, str, str] = COLOR_SIGNALS,
) -> Tuple[Signal, ...]:
    """Encode the r, g, b channels of ``color`` as slots 1..3 with integer values."""
    r, g, b = color.without_alpha().to_channels()
    return tuple(
        Signal(slot=index, name=name, value=value)
        for index, (name, value) in enumerate(zip(names, (r, g, b)), start=1)
    )
