"""Learning domain services."""

from .scheduler import DEFAULT_EASE_FACTOR, MIN_EASE_FACTOR, Scheduler

__all__ = ["DEFAULT_EASE_FACTOR", "MIN_EASE_FACTOR", "Scheduler"]
