"""Construct API schemas from learning domain objects."""

from cardwise.application.learning.use_cases.dtos import CardView
from cardwise.domain.learning.entities import Flashcard as FlashcardEntity
from cardwise.domain.learning.value_objects import Scheduled
from cardwise.infrastructure.learning.schemas import (
    CardViewResponse,
    Flashcard,
    SchedulingStateResponse,
)


def flashcard_to_schema(flashcard: FlashcardEntity) -> Flashcard:
    return Flashcard(
        id=flashcard.id.value,
        topic_id=flashcard.topic_id.value if flashcard.topic_id else None,
        summary_id=flashcard.summary_id.value if flashcard.summary_id else None,
        language=flashcard.language.code,
        is_manual=flashcard.is_manual,
        question=flashcard.question,
        answer=flashcard.answer,
        created_at=flashcard.created_at,
    )


def card_view_to_schema(card: CardView) -> CardViewResponse:
    state = card.state
    if isinstance(state, Scheduled):
        state_schema = SchedulingStateResponse(
            is_new=False,
            ease_factor=state.ease_factor,
            interval_days=state.interval_days,
            repetitions=state.repetitions,
            next_review_date=state.next_review_date,
        )
    else:
        state_schema = SchedulingStateResponse(is_new=True)

    return CardViewResponse(
        flashcard=flashcard_to_schema(card.flashcard),
        base_flashcard_id=card.base_flashcard_id.value,
        is_translation=card.is_translation,
        state=state_schema,
    )
