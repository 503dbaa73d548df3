"""Learning value objects."""

from .rating import PASSING_RATING, Rating
from .scheduling_state import NEW_CARD, NewCard, Scheduled, SchedulingState

__all__ = [
    "NEW_CARD",
    "NewCard",
    "PASSING_RATING",
    "Rating",
    "Scheduled",
    "SchedulingState",
]
