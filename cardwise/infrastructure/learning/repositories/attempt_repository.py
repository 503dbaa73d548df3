"""Repository for the append-only attempt history."""

from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from cardwise.domain.common.value_objects import FlashcardId, UserId
from cardwise.domain.learning.entities import Attempt
from cardwise.infrastructure.learning.mappers import AttemptMapper
from cardwise.models import FlashcardAttempt as FlashcardAttemptORM


class AttemptRepository:
    """Repository for Attempt domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = AttemptMapper()

    def latest_by_base_ids(
        self, base_flashcard_ids: Sequence[FlashcardId], user_id: UserId
    ) -> dict[FlashcardId, Attempt]:
        """
        Get the latest attempt of each base flashcard for a user.

        Latest means greatest attempt_date, ties broken by greatest id.
        """
        if not base_flashcard_ids:
            return {}

        ranked = (
            select(
                FlashcardAttemptORM.id.label("id"),
                func.row_number()
                .over(
                    partition_by=FlashcardAttemptORM.flashcard_id,
                    order_by=(
                        FlashcardAttemptORM.attempt_date.desc(),
                        FlashcardAttemptORM.id.desc(),
                    ),
                )
                .label("rank"),
            )
            .where(
                FlashcardAttemptORM.user_id == user_id.value,
                FlashcardAttemptORM.flashcard_id.in_([fid.value for fid in base_flashcard_ids]),
            )
            .subquery()
        )
        stmt = select(FlashcardAttemptORM).join(ranked, ranked.c.id == FlashcardAttemptORM.id).where(
            ranked.c.rank == 1
        )
        attempts = (self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all())
        return {attempt.flashcard_id: attempt for attempt in attempts}

    def insert(self, attempt: Attempt) -> Attempt:
        """
        Append an attempt.

        Returns:
            Saved attempt with its database-generated id
        """
        orm_model = self.mapper.to_orm(attempt)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
