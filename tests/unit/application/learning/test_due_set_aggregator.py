"""Tests for DueSetAggregator and due partitioning."""

from datetime import UTC, datetime, timedelta

import pytest

from cardwise.application.learning.services import (
    DueSetAggregator,
    IdentityResolver,
    partition_due,
)
from cardwise.domain.common.value_objects import Language, SummaryId, TopicId, UserId
from cardwise.domain.learning.entities import Attempt, Flashcard
from cardwise.domain.learning.services import Scheduler
from cardwise.domain.learning.value_objects import NEW_CARD, Rating
from tests.fakes import (
    FakeClock,
    InMemoryAttemptRepository,
    InMemoryFlashcardRepository,
    InMemoryTopicRepository,
    InMemoryTranslationRepository,
)

TOPIC = TopicId(1)
USER = UserId(7)


class Store:
    """Wires the in-memory repositories behind an aggregator."""

    def __init__(self) -> None:
        self.clock = FakeClock(datetime(2026, 3, 2, 9, 0, tzinfo=UTC))
        self.flashcards = InMemoryFlashcardRepository(self.clock)
        self.translations = InMemoryTranslationRepository(self.flashcards)
        self.attempts = InMemoryAttemptRepository()
        self.topics = InMemoryTopicRepository()
        self.topics.topics.add(TOPIC)
        self.aggregator = DueSetAggregator(
            flashcard_repository=self.flashcards,
            topic_repository=self.topics,
            attempt_repository=self.attempts,
            identity_resolver=IdentityResolver(self.translations),
            clock=self.clock,
        )

    def card(
        self,
        language: str = "pt",
        topic_id: TopicId | None = TOPIC,
        summary_id: SummaryId | None = None,
    ) -> Flashcard:
        flashcard = self.flashcards.add(
            Flashcard.create("Q", "A", Language(language), topic_id=topic_id, summary_id=summary_id)
        )
        self.clock.advance(seconds=1)
        return flashcard

    def variant(self, base: Flashcard, language: str) -> Flashcard:
        variant = self.card(language)
        self.translations.link(base, variant)
        return variant

    def rate(self, flashcard: Flashcard, rating: Rating, user_id: UserId = USER) -> Attempt:
        state = Scheduler().next_state(rating, NEW_CARD, now=self.clock())
        return self.attempts.insert(
            Attempt.record(user_id, flashcard.id, rating, state, attempt_date=self.clock())
        )


@pytest.fixture
def store() -> Store:
    return Store()


class TestCollectFlashcards:
    def test_combines_topic_and_summary_flashcards(self, store: Store) -> None:
        store.topics.summaries[SummaryId(3)] = TOPIC
        direct = store.card()
        via_summary = store.card(topic_id=None, summary_id=SummaryId(3))
        both = store.card(summary_id=SummaryId(3))
        store.card(topic_id=TopicId(2))

        collected = store.aggregator.collect_flashcards(TOPIC)

        assert [fc.id for fc in collected] == [direct.id, via_summary.id, both.id]

    def test_orders_by_creation_then_id(self, store: Store) -> None:
        late = store.flashcards.add(
            Flashcard.create("Q", "A", Language("pt"), topic_id=TOPIC)
        )
        store.clock.advance(seconds=-60)
        early = store.card()

        collected = store.aggregator.collect_flashcards(TOPIC)

        assert [fc.id for fc in collected] == [early.id, late.id]


class TestComputeBundle:
    def test_new_topic_has_only_new_cards(self, store: Store) -> None:
        store.card()
        store.card()

        bundle = store.aggregator.compute_bundle(TOPIC, USER)

        assert len(bundle.cards) == 2
        assert all(card.state == NEW_CARD for card in bundle.cards)
        assert bundle.has_completed_any is False
        assert bundle.computed_at == store.clock()

    def test_variants_share_base_state(self, store: Store) -> None:
        base = store.card()
        english = store.variant(base, "en")
        attempt = store.rate(base, Rating.GOOD)

        bundle = store.aggregator.compute_bundle(TOPIC, USER)

        by_id = {card.flashcard.id: card for card in bundle.cards}
        assert by_id[base.id].state == by_id[english.id].state == attempt.state
        assert by_id[english.id].base_flashcard_id == base.id
        assert by_id[english.id].is_translation
        assert bundle.has_completed_any is True

    def test_latest_attempt_wins(self, store: Store) -> None:
        base = store.card()
        store.rate(base, Rating.AGAIN)
        store.clock.advance(days=1)
        latest = store.rate(base, Rating.EASY)

        bundle = store.aggregator.compute_bundle(TOPIC, USER)

        assert bundle.cards[0].state == latest.state

    def test_other_users_attempts_ignored(self, store: Store) -> None:
        base = store.card()
        store.rate(base, Rating.GOOD, user_id=UserId(99))

        bundle = store.aggregator.compute_bundle(TOPIC, USER)

        assert bundle.cards[0].state == NEW_CARD
        assert bundle.has_completed_any is False


class TestPartitionDue:
    def test_due_boundary_and_next_available(self, store: Store) -> None:
        new = store.card()
        soon = store.card()
        later = store.card()
        soon_attempt = store.rate(soon, Rating.GOOD)  # 1 day
        store.attempts.insert(
            Attempt.record(
                USER,
                later.id,
                Rating.GOOD,
                Scheduler().next_state(Rating.GOOD, soon_attempt.state, now=store.clock()),
                attempt_date=store.clock(),
            )
        )  # 6 days
        bundle = store.aggregator.compute_bundle(TOPIC, USER)
        due_at = soon_attempt.next_review_date

        before = partition_due(bundle, due_at - timedelta(seconds=1))
        assert [card.flashcard.id for card in before.due] == [new.id]
        assert before.next_available_at == due_at

        at = partition_due(bundle, due_at)
        assert [card.flashcard.id for card in at.due] == [new.id, soon.id]
        assert at.next_available_at == due_at + timedelta(days=5)
        assert at.total_cards == 3

    def test_empty_bundle(self, store: Store) -> None:
        due = partition_due(store.aggregator.compute_bundle(TOPIC, USER), store.clock())

        assert due.due == ()
        assert due.next_available_at is None
        assert due.has_completed_any is False

    def test_all_answered(self, store: Store) -> None:
        card = store.card()
        attempt = store.rate(card, Rating.EASY)

        due = store.aggregator.compute_due(TOPIC, USER)

        assert due.due == ()
        assert due.has_completed_any is True
        assert due.next_available_at == attempt.next_review_date


class TestForLanguage:
    def test_prefers_requested_then_base(self, store: Store) -> None:
        translated = store.card()
        english = store.variant(translated, "en")
        untranslated = store.card()
        spanish_only = store.card("es")
        bundle = store.aggregator.compute_bundle(TOPIC, USER)

        view = bundle.for_language(Language("en"))

        assert [card.flashcard.id for card in view.cards] == [
            english.id,
            untranslated.id,
            spanish_only.id,
        ]

    def test_falls_back_to_base_over_other_variants(self, store: Store) -> None:
        base = store.card()
        store.variant(base, "es")
        bundle = store.aggregator.compute_bundle(TOPIC, USER)

        view = bundle.for_language(Language("de"))

        assert [card.flashcard.id for card in view.cards] == [base.id]
