"""Use case for creating flashcards in a topic."""

from collections.abc import Sequence

import structlog

from cardwise.application.learning.protocols import (
    FlashcardRepositoryProtocol,
    TopicRepositoryProtocol,
)
from cardwise.application.learning.services import TopicInvalidator
from cardwise.application.learning.use_cases.exceptions import SummaryNotFoundError
from cardwise.domain.common.value_objects import Language, SummaryId, TopicId
from cardwise.domain.learning.entities import Flashcard
from cardwise.exceptions import TopicNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class CreateFlashcardUseCase:
    """Use case for creating manual or generated flashcards in a topic."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        topic_repository: TopicRepositoryProtocol,
        topic_invalidator: TopicInvalidator,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.topic_repository = topic_repository
        self.topic_invalidator = topic_invalidator

    def create_flashcard(
        self,
        topic_id: int,
        question: str,
        answer: str,
        language: str,
        summary_id: int | None = None,
        is_manual: bool = True,
    ) -> Flashcard:
        """
        Create a flashcard in a topic.

        Args:
            topic_id: ID of the topic
            question: Question text
            answer: Answer text
            language: Language tag of the content
            summary_id: Optional ID of a summary of the same topic
            is_manual: Whether the flashcard was authored directly

        Returns:
            Created flashcard domain entity

        Raises:
            TopicNotFoundError: If topic is not found
            SummaryNotFoundError: If summary is not found
            ValidationError: If summary does not belong to the topic
        """
        created = self.create_flashcards(
            topic_id, [(question, answer)], language, summary_id=summary_id, is_manual=is_manual
        )
        return created[0]

    def create_flashcards(
        self,
        topic_id: int,
        cards: Sequence[tuple[str, str]],
        language: str,
        summary_id: int | None = None,
        is_manual: bool = False,
    ) -> list[Flashcard]:
        """
        Create a batch of flashcards, typically the output of a generator.

        The topic's cached bundles are invalidated once for the whole batch.

        Raises:
            TopicNotFoundError: If topic is not found
            SummaryNotFoundError: If summary is not found
            ValidationError: If summary does not belong to the topic
        """
        topic_id_vo = TopicId(topic_id)
        if not self.topic_repository.exists(topic_id_vo):
            raise TopicNotFoundError(topic_id)

        summary_id_vo: SummaryId | None = None
        if summary_id is not None:
            summary_id_vo = SummaryId(summary_id)
            summary_topic = self.topic_repository.find_summary_topic_id(summary_id_vo)
            if summary_topic is None:
                raise SummaryNotFoundError(summary_id)
            if summary_topic != topic_id_vo:
                raise ValidationError("Summary does not belong to this topic")

        language_vo = Language.parse(language)
        created = [
            self.flashcard_repository.save(
                Flashcard.create(
                    question=question,
                    answer=answer,
                    language=language_vo,
                    topic_id=topic_id_vo,
                    summary_id=summary_id_vo,
                    is_manual=is_manual,
                )
            )
            for question, answer in cards
        ]

        self.topic_invalidator.invalidate_topics([topic_id_vo])

        logger.info(
            "created_flashcards",
            topic_id=topic_id,
            summary_id=summary_id,
            count=len(created),
            is_manual=is_manual,
        )
        return created
