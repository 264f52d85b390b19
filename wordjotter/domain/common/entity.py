"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass
    class VocabularyItem(Entity[VocabularyItemId]):
        id: VocabularyItemId
        word: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    An id of 0 is a placeholder for an entity the database has not yet
    assigned an identity to.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. The database assigns the real one."""
        return cls(0)

    @property
    def is_persisted(self) -> bool:
        return self.value != 0


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
