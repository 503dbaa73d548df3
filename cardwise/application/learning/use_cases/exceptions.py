"""Exceptions for learning use cases."""

from cardwise.exceptions import ConflictError, NotFoundError


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: int) -> None:
        self.flashcard_id = flashcard_id
        super().__init__(f"Flashcard with id {flashcard_id} not found")


class SummaryNotFoundError(NotFoundError):
    """Summary not found error."""

    def __init__(self, summary_id: int) -> None:
        self.summary_id = summary_id
        super().__init__(f"Summary with id {summary_id} not found")


class DuplicateTranslationError(ConflictError):
    """A base flashcard already has a variant in the requested language."""

    def __init__(self, base_flashcard_id: int, language: str) -> None:
        self.base_flashcard_id = base_flashcard_id
        self.language = language
        super().__init__(
            f"Flashcard {base_flashcard_id} already has a '{language}' translation"
        )
