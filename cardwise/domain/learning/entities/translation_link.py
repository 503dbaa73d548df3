"""
Translation link between a base flashcard and one of its language variants.
"""

from dataclasses import dataclass

from cardwise.domain.common.entity import Entity
from cardwise.domain.common.exceptions import BusinessRuleViolationError
from cardwise.domain.common.value_objects import FlashcardId, Language, TranslationLinkId


@dataclass(frozen=True)
class TranslationLink(Entity[TranslationLinkId]):
    """
    Maps a translated flashcard to the base flashcard that owns its scheduling state.

    Business Rules:
    - Unique per (base_flashcard_id, target_language)
    - A translated flashcard has at most one inbound link
    - Links are never updated
    """

    id: TranslationLinkId
    base_flashcard_id: FlashcardId
    translated_flashcard_id: FlashcardId
    target_language: Language

    def __post_init__(self) -> None:
        if (
            self.translated_flashcard_id.value != 0
            and self.base_flashcard_id == self.translated_flashcard_id
        ):
            raise BusinessRuleViolationError(
                "no_self_translation", "A flashcard cannot be a translation of itself"
            )

    @classmethod
    def create(cls, base_flashcard_id: FlashcardId, target_language: Language) -> "TranslationLink":
        """Create a link whose translated side is assigned when the variant is persisted."""
        return cls(
            id=TranslationLinkId(0),
            base_flashcard_id=base_flashcard_id,
            translated_flashcard_id=FlashcardId.generate(),
            target_language=target_language,
        )
