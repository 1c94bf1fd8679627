"""
Progress Aggregation

Per-category and overall milestone achievement counts for a child.
Recomputed from the full entry snapshot on every call; nothing is cached.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from carecompanion.models.progress import ProgressEntry


class ProgressCategory(str, Enum):
    BEHAVIORAL = "behavioral"
    COMMUNICATION = "communication"
    SOCIAL = "social"


class UnknownCategoryError(ValueError):
    """Raised for an entry whose category is not a ProgressCategory."""


def achievement_percentage(achieved: int, total: int) -> int:
    """Whole-number percentage, rounding halves up. 0 when total is 0."""
    if total <= 0:
        return 0
    # Integer form of floor(100 * achieved / total + 0.5)
    return (200 * achieved + total) // (2 * total)


@dataclass
class CategoryStats:
    total: int = 0
    achieved: int = 0

    @property
    def percentage(self) -> int:
        return achievement_percentage(self.achieved, self.total)

    def record(self, achieved: bool) -> None:
        self.total += 1
        if achieved:
            self.achieved += 1

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "achieved": self.achieved,
            "percentage": self.percentage,
        }


@dataclass
class ProgressStats:
    behavioral: CategoryStats = field(default_factory=CategoryStats)
    communication: CategoryStats = field(default_factory=CategoryStats)
    social: CategoryStats = field(default_factory=CategoryStats)
    overall: CategoryStats = field(default_factory=CategoryStats)

    def for_category(self, category: ProgressCategory) -> CategoryStats:
        return getattr(self, category.value)

    def to_dict(self) -> dict:
        return {
            "behavioral": self.behavioral.to_dict(),
            "communication": self.communication.to_dict(),
            "social": self.social.to_dict(),
            "overall": self.overall.to_dict(),
        }


def _as_category(value) -> ProgressCategory:
    try:
        return ProgressCategory(value)
    except ValueError:
        raise UnknownCategoryError(f"Unknown progress category: {value!r}") from None


def aggregate_progress(entries: Iterable["ProgressEntry"]) -> ProgressStats:
    """
    Count total and achieved milestones per category and overall.

    Args:
        entries: Objects exposing ``category`` and ``achieved``

    Returns:
        ProgressStats with fresh counters

    Raises:
        UnknownCategoryError: If an entry has a category outside the three known ones
    """
    stats = ProgressStats()

    for entry in entries:
        category = _as_category(entry.category)
        achieved = bool(entry.achieved)
        stats.for_category(category).record(achieved)
        stats.overall.record(achieved)

    return stats
