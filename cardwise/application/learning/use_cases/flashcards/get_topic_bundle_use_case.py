"""Use case for reading a topic's flashcard bundle and due set."""

from cardwise.application.learning.protocols import TopicRepositoryProtocol
from cardwise.application.learning.services import BundleCache, DueSetAggregator, partition_due
from cardwise.application.learning.use_cases.dtos import Bundle, DueSet
from cardwise.domain.common.clock import Clock, utc_now
from cardwise.domain.common.value_objects import DEFAULT_LANGUAGE, Language, TopicId, UserId
from cardwise.exceptions import TopicNotFoundError


class GetTopicBundleUseCase:
    """Use case for reading a topic's flashcard bundle and due set."""

    def __init__(
        self,
        topic_repository: TopicRepositoryProtocol,
        due_set_aggregator: DueSetAggregator,
        bundle_cache: BundleCache,
        clock: Clock = utc_now,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> None:
        """Initialize use case with its collaborators."""
        self.topic_repository = topic_repository
        self.due_set_aggregator = due_set_aggregator
        self.bundle_cache = bundle_cache
        self.clock = clock
        self.default_language = default_language

    def get_bundle(self, topic_id: int, user_id: int) -> Bundle:
        """
        Get every flashcard of a topic with its scheduling state.

        Served from the bundle cache; the stores are read on a miss.

        Raises:
            TopicNotFoundError: If topic is not found
        """
        return self.bundle_cache.get(TopicId(topic_id), UserId(user_id), self._load)

    def get_due(self, topic_id: int, user_id: int, language: str | None = None) -> DueSet:
        """
        Get the flashcards due now and the time the next one unlocks.

        Args:
            topic_id: ID of the topic
            user_id: ID of the user
            language: When given, keep one variant per base flashcard,
                preferring this language

        Raises:
            TopicNotFoundError: If topic is not found
        """
        bundle = self.get_bundle(topic_id, user_id)
        if language is not None:
            bundle = bundle.for_language(Language.normalize(language, self.default_language))
        return partition_due(bundle, self.clock())

    def _load(self, topic_id: TopicId, user_id: UserId) -> Bundle:
        if not self.topic_repository.exists(topic_id):
            raise TopicNotFoundError(topic_id.value)
        return self.due_set_aggregator.compute_bundle(topic_id, user_id)
