"""Use case for recording a rating against a flashcard."""

import structlog

from cardwise.application.learning.protocols import (
    AttemptRepositoryProtocol,
    FlashcardRepositoryProtocol,
)
from cardwise.application.learning.services import IdentityResolver, TopicInvalidator
from cardwise.application.learning.use_cases.dtos import AttemptResult
from cardwise.application.learning.use_cases.exceptions import FlashcardNotFoundError
from cardwise.domain.common.clock import Clock, utc_now
from cardwise.domain.common.value_objects import FlashcardId, UserId
from cardwise.domain.learning.entities import Attempt
from cardwise.domain.learning.services import Scheduler
from cardwise.domain.learning.value_objects import NEW_CARD, Rating

logger = structlog.get_logger(__name__)


class RecordAttemptUseCase:
    """Use case for recording a rating against a flashcard."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        attempt_repository: AttemptRepositoryProtocol,
        identity_resolver: IdentityResolver,
        scheduler: Scheduler,
        topic_invalidator: TopicInvalidator,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize use case with its collaborators."""
        self.flashcard_repository = flashcard_repository
        self.attempt_repository = attempt_repository
        self.identity_resolver = identity_resolver
        self.scheduler = scheduler
        self.topic_invalidator = topic_invalidator
        self.clock = clock

    def record_attempt(self, flashcard_id: int, user_id: int, rating: int) -> AttemptResult:
        """
        Rate a flashcard and schedule its next review.

        The attempt is recorded against the base flashcard, so any language
        variant advances the same progress. The attempt is persisted before
        the topic's cached bundles are invalidated.

        Args:
            flashcard_id: ID of the rated flashcard (base or variant)
            user_id: ID of the user
            rating: Recall rating 1..4

        Returns:
            The resulting schedule

        Raises:
            ValidationError: If rating is outside 1..4
            FlashcardNotFoundError: If flashcard is not found
        """
        rating_vo = Rating.parse(rating)
        user_id_vo = UserId(user_id)

        flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id))
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)

        base_id = self.identity_resolver.resolve_base(flashcard.id)
        previous = self.attempt_repository.latest_by_base_ids([base_id], user_id_vo).get(base_id)

        now = self.clock()
        result = self.scheduler.next_state(
            rating_vo, previous.state if previous else NEW_CARD, now=now
        )
        attempt = self.attempt_repository.insert(
            Attempt.record(
                user_id=user_id_vo,
                base_flashcard_id=base_id,
                rating=rating_vo,
                result=result,
                attempt_date=now,
            )
        )

        self.topic_invalidator.invalidate_for(flashcard)

        logger.info(
            "recorded_attempt",
            attempt_id=attempt.id.value,
            flashcard_id=flashcard_id,
            base_flashcard_id=base_id.value,
            rating=int(rating_vo),
            interval_days=result.interval_days,
            repetitions=result.repetitions,
        )
        return AttemptResult(
            flashcard_id=flashcard.id,
            base_flashcard_id=base_id,
            ease_factor=result.ease_factor,
            interval_days=result.interval_days,
            repetitions=result.repetitions,
            next_review_date=result.next_review_date,
        )
