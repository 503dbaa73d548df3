"""Aggregates a topic's flashcards with the scheduling state of their base flashcards."""

from datetime import UTC, datetime

import structlog

from cardwise.application.learning.protocols import (
    AttemptRepositoryProtocol,
    FlashcardRepositoryProtocol,
    TopicRepositoryProtocol,
)
from cardwise.application.learning.services.identity_resolver import IdentityResolver
from cardwise.application.learning.use_cases.dtos import Bundle, CardView, DueSet
from cardwise.domain.common.clock import Clock, utc_now
from cardwise.domain.common.value_objects import FlashcardId, TopicId, UserId
from cardwise.domain.learning.entities import Flashcard
from cardwise.domain.learning.value_objects import NEW_CARD, SchedulingState

logger = structlog.get_logger(__name__)

_UNSAVED = datetime.min.replace(tzinfo=UTC)


def partition_due(bundle: Bundle, now: datetime) -> DueSet:
    """
    Split a bundle into the cards due at ``now`` and the next unlock time.

    A card is due when its base was never studied or its next review date is
    at or before ``now``. ``next_available_at`` is the earliest review date
    among the cards that are not due, or None when every card is due.
    """
    due: list[CardView] = []
    upcoming: list[datetime] = []
    for card in bundle.cards:
        if card.is_due(now):
            due.append(card)
        elif card.next_review_date is not None:
            upcoming.append(card.next_review_date)

    return DueSet(
        due=tuple(due),
        next_available_at=min(upcoming) if upcoming else None,
        has_completed_any=bundle.has_completed_any,
        total_cards=len(bundle.cards),
    )


def _sort_key(flashcard: Flashcard) -> tuple[datetime, int]:
    return flashcard.created_at or _UNSAVED, flashcard.id.value


class DueSetAggregator:
    """
    Builds topic bundles from the authoritative stores.

    Every call reads the stores; caching is the job of BundleCache.
    """

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        topic_repository: TopicRepositoryProtocol,
        attempt_repository: AttemptRepositoryProtocol,
        identity_resolver: IdentityResolver,
        clock: Clock = utc_now,
    ) -> None:
        self.flashcard_repository = flashcard_repository
        self.topic_repository = topic_repository
        self.attempt_repository = attempt_repository
        self.identity_resolver = identity_resolver
        self.clock = clock

    def collect_flashcards(self, topic_id: TopicId) -> list[Flashcard]:
        """
        Get every flashcard of a topic.

        Includes the flashcards attached directly to the topic and those of
        the topic's summaries, deduplicated by id and ordered by creation time
        then id.
        """
        flashcards: dict[FlashcardId, Flashcard] = {}
        for flashcard in self.flashcard_repository.find_by_topic(topic_id):
            flashcards[flashcard.id] = flashcard

        summary_ids = self.topic_repository.find_summary_ids(topic_id)
        if summary_ids:
            for flashcard in self.flashcard_repository.find_by_summary_ids(summary_ids):
                flashcards.setdefault(flashcard.id, flashcard)

        return sorted(flashcards.values(), key=_sort_key)

    def compute_bundle(self, topic_id: TopicId, user_id: UserId) -> Bundle:
        """
        Build the bundle of a topic for a user.

        Language variants resolving to the same base all appear and share the
        base's state. Bases without attempts are new cards.
        """
        flashcards = self.collect_flashcards(topic_id)
        bases = self.identity_resolver.resolve_bases(fc.id for fc in flashcards)

        distinct_bases = list(dict.fromkeys(bases.values()))
        latest = (
            self.attempt_repository.latest_by_base_ids(distinct_bases, user_id)
            if distinct_bases
            else {}
        )

        cards: list[CardView] = []
        for flashcard in flashcards:
            base_id = bases[flashcard.id]
            attempt = latest.get(base_id)
            state: SchedulingState = attempt.state if attempt is not None else NEW_CARD
            cards.append(CardView(flashcard=flashcard, base_flashcard_id=base_id, state=state))

        logger.debug(
            "computed_bundle",
            topic_id=topic_id.value,
            user_id=user_id.value,
            cards=len(cards),
            bases=len(distinct_bases),
            studied_bases=len(latest),
        )
        return Bundle(
            topic_id=topic_id,
            user_id=user_id,
            cards=tuple(cards),
            has_completed_any=bool(latest),
            computed_at=self.clock(),
        )

    def compute_due(self, topic_id: TopicId, user_id: UserId) -> DueSet:
        """Uncached due set: compute the bundle and partition it at the current time."""
        bundle = self.compute_bundle(topic_id, user_id)
        return partition_due(bundle, self.clock())
