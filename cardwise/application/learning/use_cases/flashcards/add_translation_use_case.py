"""Use case for storing a completed translation of a flashcard."""

import structlog

from cardwise.application.learning.protocols import (
    FlashcardRepositoryProtocol,
    TranslationRepositoryProtocol,
)
from cardwise.application.learning.services import IdentityResolver, TopicInvalidator
from cardwise.application.learning.use_cases.exceptions import (
    DuplicateTranslationError,
    FlashcardNotFoundError,
)
from cardwise.domain.common.value_objects import FlashcardId, Language
from cardwise.domain.learning.entities import Flashcard, TranslationLink

logger = structlog.get_logger(__name__)


class AddTranslationUseCase:
    """Use case for storing a completed translation of a flashcard."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        translation_repository: TranslationRepositoryProtocol,
        identity_resolver: IdentityResolver,
        topic_invalidator: TopicInvalidator,
    ) -> None:
        """Initialize use case with its collaborators."""
        self.flashcard_repository = flashcard_repository
        self.translation_repository = translation_repository
        self.identity_resolver = identity_resolver
        self.topic_invalidator = topic_invalidator

    def add_translation(
        self, flashcard_id: int, language: str, question: str, answer: str
    ) -> Flashcard:
        """
        Store a translated variant of a flashcard.

        The variant is always linked to the base flashcard, even when
        ``flashcard_id`` is itself a variant, so links never chain.

        Args:
            flashcard_id: ID of the flashcard that was translated
            language: Target language tag
            question: Translated question
            answer: Translated answer

        Returns:
            The new translated flashcard

        Raises:
            FlashcardNotFoundError: If flashcard is not found
            ValidationError: If language is unsupported or is the base's language
            DuplicateTranslationError: If the base already has a variant in that language
        """
        source = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id))
        if not source:
            raise FlashcardNotFoundError(flashcard_id)

        base_id = self.identity_resolver.resolve_base(source.id)
        base = source if base_id == source.id else self.flashcard_repository.find_by_id(base_id)
        if not base:
            raise FlashcardNotFoundError(base_id.value)

        language_vo = Language.parse(language)
        variant = base.translate(language_vo, question, answer)

        if self.translation_repository.find_link(base.id, language_vo):
            raise DuplicateTranslationError(base.id.value, language_vo.code)

        translated, link = self.translation_repository.save_translation(
            variant, TranslationLink.create(base.id, language_vo)
        )

        self.topic_invalidator.invalidate_for(base, translated)

        logger.info(
            "added_translation",
            base_flashcard_id=base.id.value,
            translated_flashcard_id=translated.id.value,
            link_id=link.id.value,
            language=language_vo.code,
        )
        return translated
