"""Repository for translation links between flashcards."""

from collections.abc import Sequence

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cardwise.application.learning.use_cases.exceptions import DuplicateTranslationError
from cardwise.domain.common.value_objects import FlashcardId, Language
from cardwise.domain.learning.entities import Flashcard, TranslationLink
from cardwise.infrastructure.learning.mappers import FlashcardMapper, TranslationLinkMapper
from cardwise.models import FlashcardTranslation as FlashcardTranslationORM

logger = structlog.get_logger(__name__)


class TranslationRepository:
    """Repository for TranslationLink domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TranslationLinkMapper()
        self.flashcard_mapper = FlashcardMapper()

    def find_link_by_translated_id(self, flashcard_id: FlashcardId) -> TranslationLink | None:
        stmt = select(FlashcardTranslationORM).where(
            FlashcardTranslationORM.translated_flashcard_id == flashcard_id.value
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_links_by_translated_ids(
        self, flashcard_ids: Sequence[FlashcardId]
    ) -> list[TranslationLink]:
        if not flashcard_ids:
            return []
        stmt = select(FlashcardTranslationORM).where(
            FlashcardTranslationORM.translated_flashcard_id.in_([fid.value for fid in flashcard_ids])
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_links_by_base_id(self, base_flashcard_id: FlashcardId) -> list[TranslationLink]:
        stmt = (
            select(FlashcardTranslationORM)
            .where(FlashcardTranslationORM.base_flashcard_id == base_flashcard_id.value)
            .order_by(FlashcardTranslationORM.id.asc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_link(
        self, base_flashcard_id: FlashcardId, target_language: Language
    ) -> TranslationLink | None:
        stmt = select(FlashcardTranslationORM).where(
            FlashcardTranslationORM.base_flashcard_id == base_flashcard_id.value,
            FlashcardTranslationORM.target_language == target_language.code,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save_translation(
        self, flashcard: Flashcard, link: TranslationLink
    ) -> tuple[Flashcard, TranslationLink]:
        """
        Persist a translated flashcard and its link in one transaction.

        Raises:
            DuplicateTranslationError: If the unique constraint on
                (base_flashcard_id, target_language) rejects the link
        """
        flashcard_orm = self.flashcard_mapper.to_orm(flashcard)
        self.db.add(flashcard_orm)
        try:
            self.db.flush()
            link_orm = FlashcardTranslationORM(
                base_flashcard_id=link.base_flashcard_id.value,
                translated_flashcard_id=flashcard_orm.id,
                target_language=link.target_language.code,
            )
            self.db.add(link_orm)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(
                "duplicate_translation_rejected",
                base_flashcard_id=link.base_flashcard_id.value,
                language=link.target_language.code,
            )
            raise DuplicateTranslationError(
                link.base_flashcard_id.value, link.target_language.code
            ) from e

        self.db.refresh(flashcard_orm)
        self.db.refresh(link_orm)
        return self.flashcard_mapper.to_domain(flashcard_orm), self.mapper.to_domain(link_orm)
