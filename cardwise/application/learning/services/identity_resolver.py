"""Resolves flashcard language variants to the base flashcard that owns their progress."""

from collections.abc import Iterable

from cardwise.application.learning.protocols import TranslationRepositoryProtocol
from cardwise.domain.common.value_objects import FlashcardId


class IdentityResolver:
    """
    Maps any flashcard id to its base id.

    A flashcard that is the translated side of a link resolves to the link's
    base; any other id is already a base and resolves to itself. Store errors
    propagate unchanged.
    """

    def __init__(self, translation_repository: TranslationRepositoryProtocol) -> None:
        self.translation_repository = translation_repository

    def resolve_base(self, flashcard_id: FlashcardId) -> FlashcardId:
        link = self.translation_repository.find_link_by_translated_id(flashcard_id)
        if link is None:
            return flashcard_id
        return link.base_flashcard_id

    def resolve_bases(self, flashcard_ids: Iterable[FlashcardId]) -> dict[FlashcardId, FlashcardId]:
        """Resolve many ids with a single lookup."""
        ids = list(dict.fromkeys(flashcard_ids))
        if not ids:
            return {}
        links = self.translation_repository.find_links_by_translated_ids(ids)
        bases = {link.translated_flashcard_id: link.base_flashcard_id for link in links}
        return {flashcard_id: bases.get(flashcard_id, flashcard_id) for flashcard_id in ids}
