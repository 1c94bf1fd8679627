"""
Analytics Module

Derived statistics over caregiver-recorded progress entries.
"""

from carecompanion.analytics.progress import (
    ProgressCategory,
    CategoryStats,
    ProgressStats,
    UnknownCategoryError,
    aggregate_progress,
)

__all__ = [
    "ProgressCategory",
    "CategoryStats",
    "ProgressStats",
    "UnknownCategoryError",
    "aggregate_progress",
]
