"""Protocol for translation link storage."""

from collections.abc import Sequence
from typing import Protocol

from cardwise.domain.common.value_objects import FlashcardId, Language
from cardwise.domain.learning.entities import Flashcard, TranslationLink


class TranslationRepositoryProtocol(Protocol):
    """Protocol for TranslationLink lookups and writes."""

    def find_link_by_translated_id(self, flashcard_id: FlashcardId) -> TranslationLink | None:
        """Find the link whose translated side is ``flashcard_id``."""
        ...

    def find_links_by_translated_ids(
        self, flashcard_ids: Sequence[FlashcardId]
    ) -> list[TranslationLink]:
        """Batch form of find_link_by_translated_id; ids without a link are omitted."""
        ...

    def find_links_by_base_id(self, base_flashcard_id: FlashcardId) -> list[TranslationLink]:
        """Get every translation link pointing at a base flashcard."""
        ...

    def find_link(
        self, base_flashcard_id: FlashcardId, target_language: Language
    ) -> TranslationLink | None:
        """Find the link of a base flashcard for one language."""
        ...

    def save_translation(
        self, flashcard: Flashcard, link: TranslationLink
    ) -> tuple[Flashcard, TranslationLink]:
        """
        Persist a translated flashcard and its link in one transaction.

        Returns:
            The saved flashcard and link with database-generated ids

        Raises:
            DuplicateTranslationError: If the base already has a variant in that language
        """
        ...
