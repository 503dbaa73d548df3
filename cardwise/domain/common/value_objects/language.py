"""Language value object for flashcard content."""

from dataclasses import dataclass

import structlog

from ..exceptions import ValidationError
from ..value_object import ValueObject

logger = structlog.get_logger(__name__)

SUPPORTED_LANGUAGES: tuple[str, ...] = ("pt", "en", "es", "fr", "de", "it")
DEFAULT_LANGUAGE = "pt"


@dataclass(frozen=True)
class Language(ValueObject):
    """A supported content language, stored as its two-letter base code."""

    code: str

    def __post_init__(self) -> None:
        if self.code not in SUPPORTED_LANGUAGES:
            raise ValidationError(
                f"Unsupported language '{self.code}'", field="language", value=self.code
            )

    def __str__(self) -> str:
        return self.code

    @classmethod
    def parse(cls, raw: str) -> "Language":
        """
        Parse a language tag strictly.

        Regional variants collapse to their base code ("pt-BR" -> "pt"), but an
        unsupported base code raises ValidationError.
        """
        return cls(_base_code(raw))

    @classmethod
    def normalize(cls, raw: str | None, fallback: str = DEFAULT_LANGUAGE) -> "Language":
        """
        Normalize a language tag from a profile or request header.

        Never raises for bad input: empty or unsupported tags resolve to
        ``fallback``.
        """
        if not raw:
            return cls(fallback)

        code = _base_code(raw)
        if code in SUPPORTED_LANGUAGES:
            return cls(code)

        logger.warning("unsupported_language", language=raw, fallback=fallback)
        return cls(fallback)


def _base_code(raw: str) -> str:
    return raw.strip().lower().replace("_", "-").split("-")[0]
