"""Pydantic schemas for study bundles, due sets and attempts."""

from datetime import datetime

from pydantic import BaseModel, Field

from cardwise.infrastructure.learning.schemas.flashcard_schemas import Flashcard


class SchedulingStateResponse(BaseModel):
    """Scheduling state shared by all language variants of a flashcard."""

    is_new: bool = Field(..., description="True when the flashcard was never rated")
    ease_factor: int | None = Field(None, description="Ease factor in hundredths")
    interval_days: int | None = None
    repetitions: int | None = None
    next_review_date: datetime | None = None


class CardViewResponse(BaseModel):
    """A flashcard variant with the scheduling state of its base flashcard."""

    flashcard: Flashcard
    base_flashcard_id: int
    is_translation: bool
    state: SchedulingStateResponse


class BundleResponse(BaseModel):
    """Schema for the full bundle of a topic."""

    topic_id: int
    cards: list[CardViewResponse] = Field(..., description="Every flashcard, due or not")
    has_completed_any: bool = Field(
        ..., description="Whether the user has rated any flashcard of the topic"
    )
    computed_at: datetime


class DueResponse(BaseModel):
    """Schema for the flashcards due now."""

    topic_id: int
    due: list[CardViewResponse]
    next_available_at: datetime | None = Field(
        None, description="Earliest review date among flashcards not yet due"
    )
    has_completed_any: bool
    total_cards: int


class AttemptRequest(BaseModel):
    """Schema for rating a flashcard."""

    rating: int = Field(..., ge=1, le=4, description="1 = again, 2 = hard, 3 = good, 4 = easy")


class AttemptResponse(BaseModel):
    """Schema for the schedule produced by a rating."""

    flashcard_id: int
    base_flashcard_id: int
    ease_factor: int
    interval_days: int
    repetitions: int
    next_review_date: datetime
