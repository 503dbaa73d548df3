"""Common value objects shared across all domain modules."""

from .ids import (
    AttemptId,
    FlashcardId,
    SummaryId,
    TopicId,
    TranslationLinkId,
    UserId,
)
from .language import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, Language

__all__ = [
    # IDs
    "AttemptId",
    "FlashcardId",
    "SummaryId",
    "TopicId",
    "TranslationLinkId",
    "UserId",
    # Language
    "DEFAULT_LANGUAGE",
    "Language",
    "SUPPORTED_LANGUAGES",
]
