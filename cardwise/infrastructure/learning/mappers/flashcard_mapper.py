"""Mapper for Flashcard ORM ↔ Domain conversion."""

from cardwise.domain.common.value_objects import FlashcardId, Language, SummaryId, TopicId
from cardwise.domain.learning.entities import Flashcard
from cardwise.infrastructure.learning.mappers._datetimes import as_utc
from cardwise.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            question=orm_model.question,
            answer=orm_model.answer,
            language=Language(orm_model.language),
            topic_id=TopicId(orm_model.topic_id) if orm_model.topic_id else None,
            summary_id=SummaryId(orm_model.summary_id) if orm_model.summary_id else None,
            is_manual=orm_model.is_manual,
            created_at=as_utc(orm_model.created_at),
        )

    def to_orm(
        self, domain_entity: Flashcard, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.question = domain_entity.question
            orm_model.answer = domain_entity.answer
            orm_model.language = domain_entity.language.code
            orm_model.topic_id = domain_entity.topic_id.value if domain_entity.topic_id else None
            orm_model.summary_id = (
                domain_entity.summary_id.value if domain_entity.summary_id else None
            )
            orm_model.is_manual = domain_entity.is_manual
            return orm_model

        # Create new
        return FlashcardORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            question=domain_entity.question,
            answer=domain_entity.answer,
            language=domain_entity.language.code,
            topic_id=domain_entity.topic_id.value if domain_entity.topic_id else None,
            summary_id=domain_entity.summary_id.value if domain_entity.summary_id else None,
            is_manual=domain_entity.is_manual,
        )
