"""API routes for rating, translating and deleting flashcards."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from cardwise.application.learning.use_cases.flashcards.add_translation_use_case import (
    AddTranslationUseCase,
)
from cardwise.application.learning.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from cardwise.application.learning.use_cases.flashcards.record_attempt_use_case import (
    RecordAttemptUseCase,
)
from cardwise.core import container
from cardwise.domain.common.exceptions import DomainError
from cardwise.exceptions import CardwiseError, ValidationError
from cardwise.infrastructure.common.dependencies import CurrentUserId
from cardwise.infrastructure.common.di import inject_use_case
from cardwise.infrastructure.learning.routers.converters import flashcard_to_schema
from cardwise.infrastructure.learning.schemas import (
    AttemptRequest,
    AttemptResponse,
    FlashcardDeleteResponse,
    TranslationCreateRequest,
    TranslationCreateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


@router.post(
    "/{flashcard_id}/attempt",
    response_model=AttemptResponse,
    status_code=status.HTTP_200_OK,
)
def record_attempt(
    flashcard_id: int,
    request: AttemptRequest,
    current_user_id: CurrentUserId,
    use_case: RecordAttemptUseCase = Depends(inject_use_case(container.record_attempt_use_case)),
) -> AttemptResponse:
    """
    Rate a flashcard and schedule its next review.

    Any language variant of a flashcard can be rated; progress is shared by
    all variants.

    Args:
        flashcard_id: ID of the rated flashcard
        request: Request containing the rating (1-4)
        use_case: RecordAttemptUseCase injected via dependency container

    Returns:
        The new schedule of the flashcard

    Raises:
        HTTPException: If flashcard not found or recording fails
    """
    try:
        result = use_case.record_attempt(
            flashcard_id=flashcard_id,
            user_id=current_user_id,
            rating=request.rating,
        )
        return AttemptResponse(
            flashcard_id=result.flashcard_id.value,
            base_flashcard_id=result.base_flashcard_id.value,
            ease_factor=result.ease_factor,
            interval_days=result.interval_days,
            repetitions=result.repetitions,
            next_review_date=result.next_review_date,
        )
    except (CardwiseError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to record attempt for flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{flashcard_id}/translations",
    response_model=TranslationCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_translation(
    flashcard_id: int,
    request: TranslationCreateRequest,
    use_case: AddTranslationUseCase = Depends(inject_use_case(container.add_translation_use_case)),
) -> TranslationCreateResponse:
    """
    Add a language variant to a flashcard.

    Args:
        flashcard_id: ID of the translated flashcard or of one of its variants
        request: Request containing language, question and answer
        use_case: AddTranslationUseCase injected via dependency container

    Returns:
        Created translated flashcard

    Raises:
        HTTPException: If flashcard not found, the translation exists, or creation fails
    """
    try:
        translated = use_case.add_translation(
            flashcard_id=flashcard_id,
            language=request.language,
            question=request.question,
            answer=request.answer,
        )
        return TranslationCreateResponse(
            success=True,
            message="Translation created successfully",
            flashcard=flashcard_to_schema(translated),
        )
    except (CardwiseError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to add translation to flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{flashcard_id}",
    response_model=FlashcardDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_flashcard(
    flashcard_id: int,
    use_case: DeleteFlashcardUseCase = Depends(
        inject_use_case(container.delete_flashcard_use_case)
    ),
) -> FlashcardDeleteResponse:
    """
    Delete a flashcard and, for a base flashcard, its translations.

    Args:
        flashcard_id: ID of the flashcard to delete
        use_case: DeleteFlashcardUseCase injected via dependency container

    Returns:
        Deletion confirmation

    Raises:
        HTTPException: If flashcard not found or deletion fails
    """
    try:
        deleted = use_case.delete_flashcard(flashcard_id=flashcard_id)
        return FlashcardDeleteResponse(
            success=True,
            message="Flashcard deleted successfully",
            deleted_count=deleted,
        )
    except (CardwiseError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
