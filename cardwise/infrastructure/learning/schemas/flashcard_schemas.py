"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class FlashcardBase(BaseModel):
    """Base schema for Flashcard."""

    question: str = Field(..., min_length=1, description="Question text for the flashcard")
    answer: str = Field(..., min_length=1, description="Answer text for the flashcard")


class Flashcard(FlashcardBase):
    """Schema for Flashcard response."""

    id: int
    topic_id: int | None
    summary_id: int | None
    language: str
    is_manual: bool
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class FlashcardCreateRequest(FlashcardBase):
    """Schema for creating a new flashcard in a topic."""

    language: str = Field(..., min_length=2, description="Language tag of the content, e.g. 'pt'")
    summary_id: int | None = Field(None, description="Optional summary of the same topic")


class GeneratedFlashcardsRequest(BaseModel):
    """Schema for storing a batch of generated flashcards."""

    language: str = Field(..., min_length=2, description="Language tag of the content")
    summary_id: int | None = Field(None, description="Optional summary of the same topic")
    flashcards: list[FlashcardBase] = Field(
        ..., min_length=1, description="Generated question/answer pairs"
    )


class FlashcardCreateResponse(BaseModel):
    """Schema for flashcard creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    flashcard: Flashcard = Field(..., description="Created flashcard")


class FlashcardsCreateResponse(BaseModel):
    """Schema for batch creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    flashcards: list[Flashcard] = Field(..., description="Created flashcards")


class TranslationCreateRequest(FlashcardBase):
    """Schema for adding a language variant to a flashcard."""

    language: str = Field(..., min_length=2, description="Language tag of the translation")


class TranslationCreateResponse(BaseModel):
    """Schema for translation creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    flashcard: Flashcard = Field(..., description="Created translated flashcard")


class FlashcardDeleteResponse(BaseModel):
    """Schema for flashcard deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")
    deleted_count: int = Field(..., description="Flashcards removed, translations included")
