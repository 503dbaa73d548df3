"""Repository for Flashcard domain entities."""

from collections.abc import Sequence

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cardwise.domain.common.value_objects import FlashcardId, SummaryId, TopicId
from cardwise.domain.learning.entities import Flashcard
from cardwise.infrastructure.learning.mappers import FlashcardMapper
from cardwise.models import Flashcard as FlashcardORM
from cardwise.models import FlashcardTranslation as FlashcardTranslationORM


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Returns:
            Flashcard entity if found, None otherwise
        """
        orm_model = self.db.get(FlashcardORM, flashcard_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_topic(self, topic_id: TopicId) -> list[Flashcard]:
        """
        Get the flashcards attached directly to a topic.

        Returns:
            List of flashcard entities ordered by created_at ASC, id ASC
        """
        stmt = (
            select(FlashcardORM)
            .where(FlashcardORM.topic_id == topic_id.value)
            .order_by(FlashcardORM.created_at.asc(), FlashcardORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_summary_ids(self, summary_ids: Sequence[SummaryId]) -> list[Flashcard]:
        """
        Get the flashcards of any of the given summaries.

        Returns:
            List of flashcard entities ordered by created_at ASC, id ASC
        """
        if not summary_ids:
            return []
        stmt = (
            select(FlashcardORM)
            .where(FlashcardORM.summary_id.in_([sid.value for sid in summary_ids]))
            .order_by(FlashcardORM.created_at.asc(), FlashcardORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (create or update).

        Returns:
            Saved flashcard entity with database-generated values
        """
        if flashcard.id.value == 0:
            # Create new
            orm_model = self.mapper.to_orm(flashcard)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)
        # Update existing
        orm_model = self.db.get(FlashcardORM, flashcard.id.value)
        if not orm_model:
            raise ValueError(f"Flashcard {flashcard.id.value} not found")
        self.mapper.to_orm(flashcard, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete_all(self, flashcard_ids: Sequence[FlashcardId]) -> int:
        """
        Delete flashcards together with every translation link touching them.

        Runs as one transaction: on failure nothing is deleted.

        Returns:
            Number of flashcards deleted
        """
        ids = [fid.value for fid in flashcard_ids]
        if not ids:
            return 0

        try:
            self.db.execute(
                delete(FlashcardTranslationORM).where(
                    or_(
                        FlashcardTranslationORM.translated_flashcard_id.in_(ids),
                        FlashcardTranslationORM.base_flashcard_id.in_(ids),
                    )
                )
            )
            result = self.db.execute(delete(FlashcardORM).where(FlashcardORM.id.in_(ids)))
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return result.rowcount
