"""
Attempt entity: one rating submission, recorded against a base flashcard.
"""

from dataclasses import dataclass
from datetime import datetime

from cardwise.domain.common.entity import Entity
from cardwise.domain.common.value_objects import AttemptId, FlashcardId, UserId
from cardwise.domain.learning.value_objects import Rating, Scheduled


@dataclass(frozen=True)
class Attempt(Entity[AttemptId]):
    """
    Immutable review event.

    ``flashcard_id`` is always a base identifier so progress is shared by every
    language variant. The result fields are the scheduling state the rating
    produced; the latest attempt of a base is its current state.
    """

    id: AttemptId
    user_id: UserId
    flashcard_id: FlashcardId
    rating: Rating
    attempt_date: datetime
    ease_factor: int
    interval_days: int
    repetitions: int
    next_review_date: datetime

    @property
    def state(self) -> Scheduled:
        return Scheduled(
            ease_factor=self.ease_factor,
            interval_days=self.interval_days,
            repetitions=self.repetitions,
            next_review_date=self.next_review_date,
        )

    @classmethod
    def record(
        cls,
        user_id: UserId,
        base_flashcard_id: FlashcardId,
        rating: Rating,
        result: Scheduled,
        attempt_date: datetime,
    ) -> "Attempt":
        """Create a new attempt (ID will be 0 until persisted)."""
        return cls(
            id=AttemptId.generate(),
            user_id=user_id,
            flashcard_id=base_flashcard_id,
            rating=rating,
            attempt_date=attempt_date,
            ease_factor=result.ease_factor,
            interval_days=result.interval_days,
            repetitions=result.repetitions,
            next_review_date=result.next_review_date,
        )
