"""Tests for the review Scheduler domain service."""

from datetime import UTC, datetime, timedelta

import pytest

from cardwise.domain.common.exceptions import ValidationError
from cardwise.domain.learning.services.scheduler import (
    DEFAULT_EASE_FACTOR,
    MIN_EASE_FACTOR,
    Scheduler,
    updated_ease_factor,
)
from cardwise.domain.learning.value_objects import NEW_CARD, Rating, Scheduled

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=UTC)


def _state(ease_factor: int = 250, interval_days: int = 6, repetitions: int = 2) -> Scheduled:
    return Scheduled(
        ease_factor=ease_factor,
        interval_days=interval_days,
        repetitions=repetitions,
        next_review_date=NOW,
    )


class TestEaseFactor:
    @pytest.mark.parametrize(
        ("rating", "expected"),
        [(Rating.EASY, 260), (Rating.GOOD, 250), (Rating.HARD, 236), (Rating.AGAIN, 218)],
    )
    def test_adjustment_per_rating(self, rating: Rating, expected: int) -> None:
        assert updated_ease_factor(DEFAULT_EASE_FACTOR, rating) == expected

    def test_never_drops_below_floor(self) -> None:
        assert updated_ease_factor(MIN_EASE_FACTOR, Rating.AGAIN) == MIN_EASE_FACTOR
        assert updated_ease_factor(140, Rating.AGAIN) == MIN_EASE_FACTOR


class TestScheduler:
    def test_new_card_first_success(self) -> None:
        state = Scheduler().next_state(Rating.GOOD, NEW_CARD, now=NOW)

        assert state.repetitions == 1
        assert state.interval_days == 1
        assert state.ease_factor == 250
        assert state.next_review_date == NOW + timedelta(days=1)

    def test_none_previous_is_new_card(self) -> None:
        scheduler = Scheduler()
        assert scheduler.next_state(4, None, now=NOW) == scheduler.next_state(4, NEW_CARD, now=NOW)

    def test_success_progression(self) -> None:
        scheduler = Scheduler()
        first = scheduler.next_state(Rating.GOOD, NEW_CARD, now=NOW)
        second = scheduler.next_state(Rating.GOOD, first, now=NOW)
        third = scheduler.next_state(Rating.GOOD, second, now=NOW)

        assert [s.interval_days for s in (first, second, third)] == [1, 6, 15]
        assert [s.repetitions for s in (first, second, third)] == [1, 2, 3]

    def test_third_interval_uses_updated_ease(self) -> None:
        state = Scheduler().next_state(Rating.EASY, _state(ease_factor=250), now=NOW)

        assert state.ease_factor == 260
        # round(6 * 2.60) = round(15.6)
        assert state.interval_days == 16

    def test_interval_rounds_half_up(self) -> None:
        # 5 * 2.50 = 12.5
        state = Scheduler().next_state(Rating.GOOD, _state(interval_days=5, repetitions=3), now=NOW)
        assert state.interval_days == 13

    @pytest.mark.parametrize("rating", [Rating.AGAIN, Rating.HARD])
    def test_failure_resets(self, rating: Rating) -> None:
        state = Scheduler().next_state(rating, _state(interval_days=40, repetitions=5), now=NOW)

        assert state.repetitions == 0
        assert state.interval_days == 1
        assert state.next_review_date == NOW + timedelta(days=1)

    def test_interval_floor_at_minimum_ease(self) -> None:
        state = Scheduler().next_state(
            Rating.HARD, _state(ease_factor=MIN_EASE_FACTOR, interval_days=1, repetitions=0), now=NOW
        )
        assert state.interval_days >= 1
        assert state.ease_factor == MIN_EASE_FACTOR

    def test_repeated_failures_keep_floors(self) -> None:
        scheduler = Scheduler()
        state: Scheduled | None = None
        for _ in range(20):
            state = scheduler.next_state(Rating.AGAIN, state, now=NOW)
            assert state.interval_days >= 1
            assert state.ease_factor >= MIN_EASE_FACTOR
        assert state is not None
        assert state.ease_factor == MIN_EASE_FACTOR

    def test_reads_clock_when_now_omitted(self) -> None:
        state = Scheduler(clock=lambda: NOW).next_state(Rating.GOOD)
        assert state.next_review_date == NOW + timedelta(days=1)

    @pytest.mark.parametrize("rating", [0, 5, -1, "3", 2.5, True])
    def test_invalid_rating_rejected(self, rating: object) -> None:
        with pytest.raises(ValidationError):
            Scheduler().next_state(rating, NEW_CARD, now=NOW)  # type: ignore[arg-type]
