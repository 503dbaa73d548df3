"""DTOs for learning use cases."""

from .bundle_dtos import AttemptResult, Bundle, CardView, DueSet

__all__ = ["AttemptResult", "Bundle", "CardView", "DueSet"]
