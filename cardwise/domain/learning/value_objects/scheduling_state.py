"""
Scheduling state of a base flashcard for one learner.

A flashcard that has never been rated is a ``NewCard`` and is due
immediately. Once rated it becomes ``Scheduled`` with the result fields of
its latest attempt.
"""

from dataclasses import dataclass
from datetime import datetime

from cardwise.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class NewCard(ValueObject):
    """Never studied."""

    def is_due(self, now: datetime) -> bool:
        return True

    @property
    def next_review_date(self) -> None:
        return None


@dataclass(frozen=True)
class Scheduled(ValueObject):
    """
    Result of the latest attempt.

    Attributes:
        ease_factor: Ease multiplier scaled by 100 (250 means 2.50)
        interval_days: Days between the attempt and the next review
        repetitions: Consecutive successful reviews
        next_review_date: When the card becomes due again
    """

    ease_factor: int
    interval_days: int
    repetitions: int
    next_review_date: datetime

    def is_due(self, now: datetime) -> bool:
        return self.next_review_date <= now


SchedulingState = NewCard | Scheduled

NEW_CARD = NewCard()
