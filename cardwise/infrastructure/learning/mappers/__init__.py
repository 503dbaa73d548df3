"""ORM <-> domain mappers of the learning context."""

from .attempt_mapper import AttemptMapper
from .flashcard_mapper import FlashcardMapper
from .translation_link_mapper import TranslationLinkMapper

__all__ = ["AttemptMapper", "FlashcardMapper", "TranslationLinkMapper"]
