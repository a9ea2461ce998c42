"""
Plurality vote over labeled category samples.

Each valid sample casts one vote for its effective label. The effective
label is the most deeply substituted identity the sample carries:
``double_hidden`` if not None, else ``hidden`` if not None, else ``name``.

Ties are broken in favour of the label encountered first in input order.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategorySample:
    name: str
    hidden: Optional[str] = None
    double_hidden: Optional[str] = None
    valid: bool = True

    @property
    def label(self) -> str:
        if self.double_hidden is not None:
            return self.double_hidden
        if self.hidden is not None:
            return self.hidden
        return self.name


def tally(samples: Iterable[CategorySample]) -> dict[str, int]:
    """Count votes per effective label, skipping invalid samples.

    The returned dict keeps first-encounter order.
    """
    counts: dict[str, int] = {}
    for sample in samples:
        if not sample.valid:
            continue
        label = sample.label
        counts[label] = counts.get(label, 0) + 1
    return counts


def dominant(samples: Iterable[CategorySample]) -> Optional[str]:
    """Return the label with the strictly highest count, or ``None`` if nothing voted."""
    counts = tally(samples)
    winner, max_count = None, 0
    for label, count in counts.items():
        if count > max_count:
            winner, max_count = label, count
    logger.debug("Tallied %d labels, dominant=%r (%d votes)", len(counts), winner, max_count)
    return winner
