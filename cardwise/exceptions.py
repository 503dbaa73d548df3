"""Custom exception hierarchy for the cardwise application."""


class CardwiseError(Exception):
    """Base exception for all cardwise errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(CardwiseError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class TopicNotFoundError(NotFoundError):
    """Topic not found error."""

    def __init__(self, topic_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with topic ID or custom message."""
        self.topic_id = topic_id
        if message:
            super().__init__(message)
        elif topic_id is not None:
            super().__init__(f"Topic with id {topic_id} not found")
        else:
            super().__init__("Topic not found")


class ValidationError(CardwiseError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code)


class ConflictError(CardwiseError):
    """Write rejected because it would violate a uniqueness rule."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=409)

