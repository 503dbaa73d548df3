"""Learning entities."""

from .attempt import Attempt
from .flashcard import Flashcard
from .translation_link import TranslationLink

__all__ = ["Attempt", "Flashcard", "TranslationLink"]
