"""Protocol for Flashcard repository in learning context."""

from collections.abc import Sequence
from typing import Protocol

from cardwise.domain.common.value_objects import FlashcardId, SummaryId, TopicId
from cardwise.domain.learning.entities import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Returns:
            Flashcard entity if found, None otherwise
        """
        ...

    def find_by_topic(self, topic_id: TopicId) -> list[Flashcard]:
        """
        Get the flashcards attached directly to a topic.

        Returns:
            List of flashcard entities ordered by created_at ASC, id ASC
        """
        ...

    def find_by_summary_ids(self, summary_ids: Sequence[SummaryId]) -> list[Flashcard]:
        """
        Get the flashcards of any of the given summaries.

        Returns:
            List of flashcard entities ordered by created_at ASC, id ASC
        """
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (create or update).

        Returns:
            Saved flashcard entity with database-generated values
        """
        ...

    def delete_all(self, flashcard_ids: Sequence[FlashcardId]) -> int:
        """
        Delete flashcards and every translation link touching them, all or nothing.

        Returns:
            Number of flashcards deleted
        """
        ...
