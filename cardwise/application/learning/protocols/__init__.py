"""Protocols for collaborators of the learning context."""

from .attempt_repository import AttemptRepositoryProtocol
from .flashcard_repository import FlashcardRepositoryProtocol
from .topic_repository import TopicRepositoryProtocol
from .translation_repository import TranslationRepositoryProtocol

__all__ = [
    "AttemptRepositoryProtocol",
    "FlashcardRepositoryProtocol",
    "TopicRepositoryProtocol",
    "TranslationRepositoryProtocol",
]
