"""Recall rating submitted by a learner after seeing a flashcard."""

from enum import IntEnum

from cardwise.domain.common.exceptions import ValidationError

# Ratings below this value are lapses and reset the repetition streak.
PASSING_RATING = 3


class Rating(IntEnum):
    AGAIN = 1
    HARD = 2
    GOOD = 3
    EASY = 4

    @property
    def is_success(self) -> bool:
        return self >= PASSING_RATING

    @classmethod
    def parse(cls, value: object) -> "Rating":
        """
        Validate a raw rating.

        Raises:
            ValidationError: If value is not an integer in 1..4
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError("Rating must be an integer", field="rating", value=value)
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                "Rating must be between 1 and 4", field="rating", value=value
            ) from None
