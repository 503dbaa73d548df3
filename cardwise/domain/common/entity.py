"""
Base class for Entities.

Entities carry an identity that runs through time. Two entities are equal
if they have the same identity, regardless of their attributes.

Example:
    @dataclass
    class Flashcard(Entity[FlashcardId]):
        id: FlashcardId
        question: str
        answer: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs wrap a non-negative integer. Zero is the placeholder for an
    entity that has not been persisted yet.

    Example:
        @dataclass(frozen=True)
        class TopicId(EntityId):
            pass

        TopicId(42) == FlashcardId(42)  # False, different types
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __str__(self) -> str:
        return str(self.value)

    def __lt__(self, other: "EntityId") -> bool:
        return self.value < other.value

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. Usually these are set by the database"""
        return cls(0)


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
