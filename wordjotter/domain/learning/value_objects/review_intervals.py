"""
Review interval table for spaced repetition.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from wordjotter.domain.common.exceptions import ValidationError
from wordjotter.domain.common.value_object import ValueObject

DEFAULT_REVIEW_INTERVALS: tuple[int, ...] = (1, 3, 7, 14, 30, 90)


@dataclass(frozen=True)
class ReviewIntervals(ValueObject):
    """
    Days to wait before the next review, indexed by mastery level.

    The table length defines the number of mastery levels. Intervals must be
    positive and must never shrink as the level grows.
    """

    days: tuple[int, ...] = DEFAULT_REVIEW_INTERVALS

    def __post_init__(self) -> None:
        if not self.days:
            raise ValidationError("At least one review interval is required", field="days")
        for day_count in self.days:
            if day_count <= 0:
                raise ValidationError(
                    "Review intervals must be positive", field="days", value=self.days
                )
        for shorter, longer in zip(self.days, self.days[1:]):
            if longer < shorter:
                raise ValidationError(
                    "Review intervals must be non-decreasing", field="days", value=self.days
                )

    @classmethod
    def from_days(cls, days: Iterable[int]) -> "ReviewIntervals":
        return cls(days=tuple(days))

    @property
    def level_count(self) -> int:
        return len(self.days)

    @property
    def max_level(self) -> int:
        return len(self.days) - 1

    def clamp(self, level: int) -> int:
        """Force a mastery level into the valid range of this table."""
        return max(0, min(level, self.max_level))

    def days_for(self, level: int) -> int:
        return self.days[self.clamp(level)]
