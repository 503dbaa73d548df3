"""
Flashcard entity for spaced repetition learning.
"""

from dataclasses import dataclass
from datetime import datetime

from cardwise.domain.common.entity import Entity
from cardwise.domain.common.exceptions import DomainError, ValidationError
from cardwise.domain.common.value_objects import FlashcardId, Language, SummaryId, TopicId


@dataclass
class Flashcard(Entity[FlashcardId]):
    """
    Question/answer pair in exactly one language.

    Business Rules:
    - Question and answer cannot be empty
    - Flashcard must belong to a topic, a summary, or both
    - A translated variant keeps the topic, summary and manual flag of its source
    """

    id: FlashcardId
    question: str
    answer: str
    language: Language
    topic_id: TopicId | None = None
    summary_id: SummaryId | None = None
    is_manual: bool = False
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.question or not self.question.strip():
            raise DomainError("Question cannot be empty")
        if not self.answer or not self.answer.strip():
            raise DomainError("Answer cannot be empty")
        if self.topic_id is None and self.summary_id is None:
            raise DomainError("Flashcard must belong to a topic or a summary")

    def translate(self, language: Language, question: str, answer: str) -> "Flashcard":
        """
        Build the variant of this flashcard in another language.

        Raises:
            ValidationError: If the target language is this flashcard's own language
        """
        if language == self.language:
            raise ValidationError(
                "Translation language must differ from the source language",
                field="language",
                value=language.code,
            )
        return Flashcard.create(
            question=question,
            answer=answer,
            language=language,
            topic_id=self.topic_id,
            summary_id=self.summary_id,
            is_manual=self.is_manual,
        )

    @classmethod
    def create(
        cls,
        question: str,
        answer: str,
        language: Language,
        topic_id: TopicId | None = None,
        summary_id: SummaryId | None = None,
        is_manual: bool = False,
    ) -> "Flashcard":
        """Create a new flashcard (ID will be 0 until persisted)."""
        return cls(
            id=FlashcardId.generate(),
            question=question.strip(),
            answer=answer.strip(),
            language=language,
            topic_id=topic_id,
            summary_id=summary_id,
            is_manual=is_manual,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        question: str,
        answer: str,
        language: Language,
        created_at: datetime,
        topic_id: TopicId | None = None,
        summary_id: SummaryId | None = None,
        is_manual: bool = False,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            question=question,
            answer=answer,
            language=language,
            topic_id=topic_id,
            summary_id=summary_id,
            is_manual=is_manual,
            created_at=created_at,
        )
