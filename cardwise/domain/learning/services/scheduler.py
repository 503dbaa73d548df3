"""
Review scheduler.

SM-2 variant working on a 1..4 rating scale with the ease factor kept as an
integer scaled by 100. Ratings 1 and 2 are lapses, 3 and 4 are successes.
"""

from datetime import datetime, timedelta

from cardwise.domain.common.clock import Clock, utc_now
from cardwise.domain.learning.value_objects import Rating, Scheduled, SchedulingState

DEFAULT_EASE_FACTOR = 250
MIN_EASE_FACTOR = 130
FIRST_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 6
MIN_INTERVAL_DAYS = 1


def updated_ease_factor(ease_factor: int, rating: Rating) -> int:
    """Apply the ease adjustment for a rating: +10 for 4, 0 for 3, -14 for 2, -32 for 1."""
    penalty = 4 - rating
    return max(MIN_EASE_FACTOR, ease_factor + (10 - penalty * (8 + penalty * 2)))


def _scaled_interval(interval_days: int, ease_factor: int) -> int:
    # round(interval * ease / 100), half-up
    return (interval_days * ease_factor + 50) // 100


class Scheduler:
    """
    Computes the next scheduling state from a rating.

    Stateless apart from the clock, which is read once per call.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def next_state(
        self,
        rating: Rating | int,
        previous: SchedulingState | None = None,
        now: datetime | None = None,
    ) -> Scheduled:
        """
        Schedule the next review.

        Args:
            rating: Recall rating 1..4
            previous: Latest state of the base flashcard, ``None``/``NewCard`` if never studied
            now: Review time; read from the clock when omitted

        Returns:
            The new state, due ``interval_days`` calendar days from now

        Raises:
            ValidationError: If rating is outside 1..4
        """
        rating = Rating.parse(rating)
        if now is None:
            now = self._clock()

        if isinstance(previous, Scheduled):
            ease_factor = previous.ease_factor
            repetitions = previous.repetitions
            interval_days = previous.interval_days
        else:
            ease_factor = DEFAULT_EASE_FACTOR
            repetitions = 0
            interval_days = 0

        ease_factor = updated_ease_factor(ease_factor, rating)

        if not rating.is_success:
            repetitions = 0
            interval_days = FIRST_INTERVAL_DAYS
        else:
            repetitions += 1
            if repetitions == 1:
                interval_days = FIRST_INTERVAL_DAYS
            elif repetitions == 2:
                interval_days = SECOND_INTERVAL_DAYS
            else:
                interval_days = _scaled_interval(interval_days, ease_factor)

        interval_days = max(MIN_INTERVAL_DAYS, interval_days)

        return Scheduled(
            ease_factor=ease_factor,
            interval_days=interval_days,
            repetitions=repetitions,
            next_review_date=now + timedelta(days=interval_days),
        )
