"""Protocol for the append-only attempt history."""

from collections.abc import Sequence
from typing import Protocol

from cardwise.domain.common.value_objects import FlashcardId, UserId
from cardwise.domain.learning.entities import Attempt


class AttemptRepositoryProtocol(Protocol):
    """Protocol for Attempt storage."""

    def latest_by_base_ids(
        self, base_flashcard_ids: Sequence[FlashcardId], user_id: UserId
    ) -> dict[FlashcardId, Attempt]:
        """
        Get the latest attempt of each base flashcard for a user.

        Latest means greatest attempt_date, ties broken by greatest id.
        Bases without attempts are absent from the result.
        """
        ...

    def insert(self, attempt: Attempt) -> Attempt:
        """
        Append an attempt.

        Returns:
            Saved attempt with its database-generated id
        """
        ...
