"""API routes for the flashcards of a topic."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from cardwise.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from cardwise.application.learning.use_cases.flashcards.get_topic_bundle_use_case import (
    GetTopicBundleUseCase,
)
from cardwise.core import container
from cardwise.domain.common import DomainError
from cardwise.exceptions import CardwiseError, ValidationError
from cardwise.infrastructure.common.dependencies import CurrentUserId
from cardwise.infrastructure.common.di import inject_use_case
from cardwise.infrastructure.learning.routers.converters import (
    card_view_to_schema,
    flashcard_to_schema,
)
from cardwise.infrastructure.learning.schemas import (
    BundleResponse,
    DueResponse,
    FlashcardCreateRequest,
    FlashcardCreateResponse,
    FlashcardsCreateResponse,
    GeneratedFlashcardsRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/topics", tags=["flashcards"])


@router.get(
    "/{topic_id}/flashcards/bundle",
    response_model=BundleResponse,
    status_code=status.HTTP_200_OK,
)
def get_topic_bundle(
    topic_id: int,
    current_user_id: CurrentUserId,
    use_case: GetTopicBundleUseCase = Depends(
        inject_use_case(container.get_topic_bundle_use_case)
    ),
) -> BundleResponse:
    """
    Get every flashcard of a topic with its scheduling state.

    Includes the flashcards of the topic's summaries and every language
    variant. May be up to the cache lifetime old.

    Args:
        topic_id: ID of the topic
        use_case: GetTopicBundleUseCase injected via dependency container

    Returns:
        Bundle of the topic

    Raises:
        HTTPException: If topic not found or fetching fails
    """
    try:
        bundle = use_case.get_bundle(topic_id, current_user_id)
        return BundleResponse(
            topic_id=bundle.topic_id.value,
            cards=[card_view_to_schema(card) for card in bundle.cards],
            has_completed_any=bundle.has_completed_any,
            computed_at=bundle.computed_at,
        )
    except (CardwiseError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to get flashcard bundle for topic {topic_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{topic_id}/flashcards/due",
    response_model=DueResponse,
    status_code=status.HTTP_200_OK,
)
def get_due_flashcards(
    topic_id: int,
    current_user_id: CurrentUserId,
    language: str | None = Query(None, description="Preferred language of each flashcard"),
    use_case: GetTopicBundleUseCase = Depends(
        inject_use_case(container.get_topic_bundle_use_case)
    ),
) -> DueResponse:
    """
    Get the flashcards of a topic that are due for review now.

    With ``language``, only one variant per flashcard is returned, preferring
    that language and falling back to the base flashcard.

    Args:
        topic_id: ID of the topic
        language: Optional language tag, e.g. 'en'
        use_case: GetTopicBundleUseCase injected via dependency container

    Returns:
        Due flashcards and the time the next one unlocks

    Raises:
        HTTPException: If topic not found or fetching fails
    """
    try:
        due_set = use_case.get_due(topic_id, current_user_id, language=language)
        return DueResponse(
            topic_id=topic_id,
            due=[card_view_to_schema(card) for card in due_set.due],
            next_available_at=due_set.next_available_at,
            has_completed_any=due_set.has_completed_any,
            total_cards=due_set.total_cards,
        )
    except (CardwiseError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to get due flashcards for topic {topic_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{topic_id}/flashcards",
    response_model=FlashcardCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_flashcard_for_topic(
    topic_id: int,
    request: FlashcardCreateRequest,
    use_case: CreateFlashcardUseCase = Depends(
        inject_use_case(container.create_flashcard_use_case)
    ),
) -> FlashcardCreateResponse:
    """
    Create a manual flashcard in a topic.

    Args:
        topic_id: ID of the topic
        request: Request containing question, answer, language and optional summary
        use_case: CreateFlashcardUseCase injected via dependency container

    Returns:
        Created flashcard

    Raises:
        HTTPException: If topic or summary not found or creation fails
    """
    try:
        flashcard_entity = use_case.create_flashcard(
            topic_id=topic_id,
            question=request.question,
            answer=request.answer,
            language=request.language,
            summary_id=request.summary_id,
        )
        return FlashcardCreateResponse(
            success=True,
            message="Flashcard created successfully",
            flashcard=flashcard_to_schema(flashcard_entity),
        )
    except (CardwiseError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcard for topic {topic_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{topic_id}/flashcards/generated",
    response_model=FlashcardsCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def store_generated_flashcards(
    topic_id: int,
    request: GeneratedFlashcardsRequest,
    use_case: CreateFlashcardUseCase = Depends(
        inject_use_case(container.create_flashcard_use_case)
    ),
) -> FlashcardsCreateResponse:
    """
    Store a batch of generated flashcards in a topic.

    Args:
        topic_id: ID of the topic
        request: Request containing the language, optional summary and the pairs
        use_case: CreateFlashcardUseCase injected via dependency container

    Returns:
        Created flashcards

    Raises:
        HTTPException: If topic or summary not found or creation fails
    """
    try:
        created = use_case.create_flashcards(
            topic_id=topic_id,
            cards=[(card.question, card.answer) for card in request.flashcards],
            language=request.language,
            summary_id=request.summary_id,
        )
        return FlashcardsCreateResponse(
            success=True,
            message=f"{len(created)} flashcards created successfully",
            flashcards=[flashcard_to_schema(fc) for fc in created],
        )
    except (CardwiseError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to store generated flashcards for topic {topic_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
