"""
Base class for Value Objects.

A value object has no identity of its own: two instances holding the same
attributes are interchangeable.

Example:
    @dataclass(frozen=True)
    class ReviewIntervals(ValueObject):
        days: tuple[int, ...]
"""


class ValueObject:
    """
    Marker base for immutable, self-validating domain values.

    Subclasses are frozen dataclasses and validate in __post_init__.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(self.__dict__.values()))
