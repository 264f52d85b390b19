"""Learning context value objects."""

from .review_intervals import DEFAULT_REVIEW_INTERVALS, ReviewIntervals

__all__ = [
    "DEFAULT_REVIEW_INTERVALS",
    "ReviewIntervals",
]
