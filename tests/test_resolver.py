import logging
from types import MappingProxyType

import pytest

from biome_color.colors import RgbColor
from biome_color.resolver import UnknownCategoryError, resolve
from biome_color.voting import CategorySample

CATEGORY_COLORS = MappingProxyType({
    "grass": RgbColor((40, 90, 20)),
    "water": RgbColor((10, 40, 160)),
    "sand": {"r": 200, "g": 180, "b": 120},
})


def no_fallback():
    raise AssertionError("fallback should not be called")


def test_dominant_category_is_normalized():
    votes = [CategorySample("grass"), CategorySample("grass"), CategorySample("water")]
    assert resolve(votes, CATEGORY_COLORS, no_fallback).to_channels() == (95, 204, 51)


def test_mapping_colors_are_accepted():
    result = resolve([CategorySample("sand")], CATEGORY_COLORS, no_fallback)
    assert isinstance(result, RgbColor)
    hsl = result.to_hsl()
    assert abs(hsl.s - 0.6) < 1e-6
    assert abs(hsl.l - 0.5) < 1e-6


def test_fallback_used_when_nothing_votes():
    calls = []

    def fallback():
        calls.append(True)
        return "water"

    invalid = [CategorySample("grass", valid=False)]
    expected = resolve([CategorySample("water")], CATEGORY_COLORS, no_fallback)
    assert resolve(invalid, CATEGORY_COLORS, fallback) == expected
    assert resolve([], CATEGORY_COLORS, fallback) == expected
    assert len(calls) == 2


def test_unknown_winner_raises():
    with pytest.raises(UnknownCategoryError) as excinfo:
        resolve([CategorySample("lava")], CATEGORY_COLORS, no_fallback)
    assert excinfo.value.category == "lava"
    assert "lava" in str(excinfo.value)


def test_unknown_fallback_raises_key_error():
    with pytest.raises(KeyError):
        resolve([], CATEGORY_COLORS, lambda: "void")


def test_fallback_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="biome_color.resolver"):
        resolve([], CATEGORY_COLORS, lambda: "grass")
    assert "fell back to 'grass'" in caplog.text
