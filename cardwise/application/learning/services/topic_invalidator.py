"""Invalidates cached bundles of the topics a write touched."""

from cardwise.application.learning.protocols import TopicRepositoryProtocol
from cardwise.application.learning.services.bundle_cache import BundleCache
from cardwise.domain.common.value_objects import TopicId
from cardwise.domain.learning.entities import Flashcard


class TopicInvalidator:
    """Resolves the topics of flashcards and drops their bundle cache entries."""

    def __init__(self, topic_repository: TopicRepositoryProtocol, bundle_cache: BundleCache) -> None:
        self.topic_repository = topic_repository
        self.bundle_cache = bundle_cache

    def topics_of(self, *flashcards: Flashcard) -> list[TopicId]:
        """
        Topics a flashcard is reachable from.

        A flashcard attached to a summary is reachable from the summary's
        topic as well as from its own topic.
        """
        topics: dict[TopicId, None] = {}
        for flashcard in flashcards:
            if flashcard.topic_id is not None:
                topics[flashcard.topic_id] = None
            if flashcard.summary_id is not None:
                summary_topic = self.topic_repository.find_summary_topic_id(flashcard.summary_id)
                if summary_topic is not None:
                    topics[summary_topic] = None
        return list(topics)

    def invalidate_topics(self, topic_ids: list[TopicId]) -> None:
        for topic_id in topic_ids:
            self.bundle_cache.invalidate(topic_id)

    def invalidate_for(self, *flashcards: Flashcard) -> None:
        self.invalidate_topics(self.topics_of(*flashcards))
