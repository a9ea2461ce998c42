from __future__ import annotations
import logging
from typing import Callable, Iterable, Mapping

from .colors import RgbColor
from .normalizers import ColorInput, normalize_color
from .voting import CategorySample, dominant

logger = logging.getLogger(__name__)

CategoryColors = Mapping[str, ColorInput]


class UnknownCategoryError(KeyError):
    """A category has no entry in the category color table."""

    def __init__(self, category: str) -> None:
        super().__init__(category)
        self.category = category

    def __str__(self) -> str:
        return f"No color registered for category {self.category!r}"


def lookup_color(category: str, category_colors: CategoryColors) -> ColorInput:
    try:
        return category_colors[category]
    except KeyError:
        raise UnknownCategoryError(category) from None


def resolve(
    samples: Iterable[CategorySample],
    category_colors: CategoryColors,
    fallback: Callable[[], str],
) -> RgbColor:
    """
    Pick the dominant category among ``samples`` and return its normalized color.

    Args:
        samples: Nearby category samples; invalid ones are ignored.
        category_colors: Read-only table from category label to its color.
        fallback: Called for a label when no sample voted.

    Returns:
        RgbColor: The category color with pinned saturation and lightness.

    Raises:
        UnknownCategoryError: The chosen label is missing from ``category_colors``.
    """
    category = dominant(samples)
    if category is None:
        category = fallback()
        logger.debug("No dominant category, fell back to %r", category)
    return normalize_color(lookup_color(category, category_colors))
