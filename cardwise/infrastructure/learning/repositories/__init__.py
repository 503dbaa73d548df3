"""SQLAlchemy repositories of the learning context."""

from .attempt_repository import AttemptRepository
from .flashcard_repository import FlashcardRepository
from .topic_repository import TopicRepository
from .translation_repository import TranslationRepository

__all__ = [
    "AttemptRepository",
    "FlashcardRepository",
    "TopicRepository",
    "TranslationRepository",
]
