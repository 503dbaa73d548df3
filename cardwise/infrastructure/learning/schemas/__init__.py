"""Learning context schemas."""

from cardwise.infrastructure.learning.schemas.bundle_schemas import (
    AttemptRequest,
    AttemptResponse,
    BundleResponse,
    CardViewResponse,
    DueResponse,
    SchedulingStateResponse,
)
from cardwise.infrastructure.learning.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardBase,
    FlashcardCreateRequest,
    FlashcardCreateResponse,
    FlashcardDeleteResponse,
    FlashcardsCreateResponse,
    GeneratedFlashcardsRequest,
    TranslationCreateRequest,
    TranslationCreateResponse,
)

__all__ = [
    "AttemptRequest",
    "AttemptResponse",
    "BundleResponse",
    "CardViewResponse",
    "DueResponse",
    "Flashcard",
    "FlashcardBase",
    "FlashcardCreateRequest",
    "FlashcardCreateResponse",
    "FlashcardDeleteResponse",
    "FlashcardsCreateResponse",
    "GeneratedFlashcardsRequest",
    "SchedulingStateResponse",
    "TranslationCreateRequest",
    "TranslationCreateResponse",
]
