"""Mapper for Attempt ORM ↔ Domain conversion."""

from cardwise.domain.common.value_objects import AttemptId, FlashcardId, UserId
from cardwise.domain.learning.entities import Attempt
from cardwise.domain.learning.value_objects import Rating
from cardwise.infrastructure.learning.mappers._datetimes import as_utc
from cardwise.models import FlashcardAttempt as FlashcardAttemptORM


class AttemptMapper:
    """Mapper for Attempt ORM ↔ Domain conversion. Attempts are never updated."""

    def to_domain(self, orm_model: FlashcardAttemptORM) -> Attempt:
        return Attempt(
            id=AttemptId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            flashcard_id=FlashcardId(orm_model.flashcard_id),
            rating=Rating(orm_model.rating),
            attempt_date=as_utc(orm_model.attempt_date),
            ease_factor=orm_model.ease_factor,
            interval_days=orm_model.interval_days,
            repetitions=orm_model.repetitions,
            next_review_date=as_utc(orm_model.next_review_date),
        )

    def to_orm(self, domain_entity: Attempt) -> FlashcardAttemptORM:
        return FlashcardAttemptORM(
            user_id=domain_entity.user_id.value,
            flashcard_id=domain_entity.flashcard_id.value,
            rating=int(domain_entity.rating),
            attempt_date=as_utc(domain_entity.attempt_date),
            ease_factor=domain_entity.ease_factor,
            interval_days=domain_entity.interval_days,
            repetitions=domain_entity.repetitions,
            next_review_date=as_utc(domain_entity.next_review_date),
        )
