from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int


@dataclass(frozen=True)
class TopicId(EntityId):
    """Strongly-typed topic identifier."""

    value: int


@dataclass(frozen=True)
class SummaryId(EntityId):
    """Strongly-typed summary identifier."""

    value: int


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""

    value: int

    @classmethod
    def generate(cls) -> "FlashcardId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class TranslationLinkId(EntityId):
    """Strongly-typed translation link identifier."""

    value: int


@dataclass(frozen=True)
class AttemptId(EntityId):
    """Strongly-typed flashcard attempt identifier."""

    value: int

    @classmethod
    def generate(cls) -> "AttemptId":
        return cls(0)  # Database assigns real ID
