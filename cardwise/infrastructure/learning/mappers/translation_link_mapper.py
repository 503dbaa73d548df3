"""Mapper for TranslationLink ORM ↔ Domain conversion."""

from cardwise.domain.common.value_objects import FlashcardId, Language, TranslationLinkId
from cardwise.domain.learning.entities import TranslationLink
from cardwise.models import FlashcardTranslation as FlashcardTranslationORM


class TranslationLinkMapper:
    """Mapper for TranslationLink ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardTranslationORM) -> TranslationLink:
        return TranslationLink(
            id=TranslationLinkId(orm_model.id),
            base_flashcard_id=FlashcardId(orm_model.base_flashcard_id),
            translated_flashcard_id=FlashcardId(orm_model.translated_flashcard_id),
            target_language=Language(orm_model.target_language),
        )

    def to_orm(self, domain_entity: TranslationLink) -> FlashcardTranslationORM:
        return FlashcardTranslationORM(
            base_flashcard_id=domain_entity.base_flashcard_id.value,
            translated_flashcard_id=domain_entity.translated_flashcard_id.value,
            target_language=domain_entity.target_language.code,
        )
