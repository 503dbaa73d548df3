"""Use case for deleting flashcards."""

import structlog

from cardwise.application.learning.protocols import (
    FlashcardRepositoryProtocol,
    TranslationRepositoryProtocol,
)
from cardwise.application.learning.services import TopicInvalidator
from cardwise.application.learning.use_cases.exceptions import FlashcardNotFoundError
from cardwise.domain.common.value_objects import FlashcardId

logger = structlog.get_logger(__name__)


class DeleteFlashcardUseCase:
    """Use case for deleting flashcards."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        translation_repository: TranslationRepositoryProtocol,
        topic_invalidator: TopicInvalidator,
    ) -> None:
        """Initialize use case with its collaborators."""
        self.flashcard_repository = flashcard_repository
        self.translation_repository = translation_repository
        self.topic_invalidator = topic_invalidator

    def delete_flashcard(self, flashcard_id: int) -> int:
        """
        Delete a flashcard.

        Deleting a base flashcard also deletes its translated variants so no
        variant is left without a base. Attempt history is kept.

        Returns:
            Number of flashcards deleted

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id))
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)

        topics = self.topic_invalidator.topics_of(flashcard)

        variant_ids = [
            link.translated_flashcard_id
            for link in self.translation_repository.find_links_by_base_id(flashcard.id)
        ]
        deleted = self.flashcard_repository.delete_all([*variant_ids, flashcard.id])

        self.topic_invalidator.invalidate_topics(topics)

        logger.info("deleted_flashcard", flashcard_id=flashcard_id, deleted=deleted)
        return deleted
