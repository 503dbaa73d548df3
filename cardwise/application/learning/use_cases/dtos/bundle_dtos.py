"""DTOs for topic bundles and due sets."""

from dataclasses import dataclass, replace
from datetime import datetime

from cardwise.domain.common.value_objects import FlashcardId, Language, TopicId, UserId
from cardwise.domain.learning.entities import Flashcard
from cardwise.domain.learning.value_objects import SchedulingState


@dataclass(frozen=True)
class CardView:
    """A displayable flashcard variant with the scheduling state of its base."""

    flashcard: Flashcard
    base_flashcard_id: FlashcardId
    state: SchedulingState

    @property
    def is_translation(self) -> bool:
        return self.flashcard.id != self.base_flashcard_id

    @property
    def next_review_date(self) -> datetime | None:
        return self.state.next_review_date

    def is_due(self, now: datetime) -> bool:
        return self.state.is_due(now)


@dataclass(frozen=True)
class Bundle:
    """
    Every flashcard of a topic, due or not, with resolved scheduling state.

    ``has_completed_any`` tells an empty topic apart from one whose cards have
    all been answered.
    """

    topic_id: TopicId
    user_id: UserId
    cards: tuple[CardView, ...]
    has_completed_any: bool
    computed_at: datetime

    def for_language(self, language: Language) -> "Bundle":
        """
        Keep one variant per base flashcard.

        The variant in ``language`` wins; otherwise the base flashcard itself,
        otherwise the first variant seen.
        """
        chosen: dict[FlashcardId, CardView] = {}
        for card in self.cards:
            current = chosen.get(card.base_flashcard_id)
            if current is None or _preference(card, language) < _preference(current, language):
                chosen[card.base_flashcard_id] = card

        order = list(dict.fromkeys(card.base_flashcard_id for card in self.cards))
        return replace(self, cards=tuple(chosen[base_id] for base_id in order))


def _preference(card: CardView, language: Language) -> int:
    if card.flashcard.language == language:
        return 0
    if not card.is_translation:
        return 1
    return 2


@dataclass(frozen=True)
class DueSet:
    """Cards due now and when the next not-yet-due card unlocks."""

    due: tuple[CardView, ...]
    next_available_at: datetime | None
    has_completed_any: bool
    total_cards: int


@dataclass(frozen=True)
class AttemptResult:
    """Outcome of recording a rating."""

    flashcard_id: FlashcardId
    base_flashcard_id: FlashcardId
    ease_factor: int
    interval_days: int
    repetitions: int
    next_review_date: datetime
