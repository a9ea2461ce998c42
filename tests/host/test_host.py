from dataclasses import dataclass
from typing import Optional

import pytest

from biome_color.colors import RgbColor
from biome_color.host import COLOR_SIGNALS, Signal, biome_color_at, color_signals, sample_from_tile
from biome_color.resolver import UnknownCategoryError

TILE_COLORS = {
    "grass": RgbColor((40, 90, 20)),
    "water": RgbColor((10, 40, 160)),
    "landfill": RgbColor((90, 80, 60)),
}


@dataclass
class FakeTile:
    name: str
    hidden_tile: Optional[str] = None
    double_hidden_tile: Optional[str] = None
    valid: bool = True


class FakeSurface:
    def __init__(self, nearby, under):
        self.nearby = nearby
        self.under = under
        self.queries = []

    def find_tiles(self, position, radius):
        self.queries.append((position, radius))
        return list(self.nearby)

    def tile_at(self, position):
        return self.under


def test_sample_from_tile():
    sample = sample_from_tile(FakeTile("concrete", hidden_tile="grass", valid=False))
    assert sample.name == "concrete"
    assert sample.label == "grass"
    assert not sample.valid


def test_biome_color_from_dominant_tile():
    surface = FakeSurface(
        nearby=[FakeTile("grass"), FakeTile("water"), FakeTile("concrete", hidden_tile="grass")],
        under=FakeTile("water"),
    )
    assert biome_color_at(surface, (3.5, -1.5), TILE_COLORS).to_channels() == (95, 204, 51)
    assert surface.queries == [((3.5, -1.5), 2)]


def test_biome_color_falls_back_to_tile_under_position():
    surface = FakeSurface(nearby=[FakeTile("grass", valid=False)], under=FakeTile("water"))
    expected = biome_color_at(FakeSurface([FakeTile("water")], None), (0, 0), TILE_COLORS)
    assert biome_color_at(surface, (0, 0), TILE_COLORS) == expected


def test_fallback_uses_plain_tile_name():
    surface = FakeSurface(nearby=[], under=FakeTile("landfill", hidden_tile="water"))
    expected = biome_color_at(FakeSurface([FakeTile("landfill")], None), (0, 0), TILE_COLORS)
    assert biome_color_at(surface, (0, 0), TILE_COLORS) == expected


def test_custom_radius():
    surface = FakeSurface(nearby=[FakeTile("grass")], under=None)
    biome_color_at(surface, (0, 0), TILE_COLORS, radius=5)
    assert surface.queries == [((0, 0), 5)]


def test_unknown_tile_raises():
    surface = FakeSurface(nearby=[FakeTile("lava")], under=None)
    with pytest.raises(UnknownCategoryError):
        biome_color_at(surface, (0, 0), TILE_COLORS)


def test_color_signals():
    signals = color_signals(RgbColor((204.00000000000003, 51.00000000000001, 51.0, 80)))
    assert signals == (
        Signal(slot=1, name="signal-red", value=204),
        Signal(slot=2, name="signal-green", value=51),
        Signal(slot=3, name="signal-blue", value=51),
    )
    assert tuple(s.name for s in signals) == COLOR_SIGNALS
    assert all(isinstance(s.value, int) for s in signals)


def test_color_signals_custom_names():
    signals = color_signals(RgbColor((1, 2, 3)), names=("r", "g", "b"))
    assert [(s.name, s.value) for s in signals] == [("r", 1), ("g", 2), ("b", 3)]
