"""Protocol for the topic/summary structure the learning context reads."""

from typing import Protocol

from cardwise.domain.common.value_objects import SummaryId, TopicId


class TopicRepositoryProtocol(Protocol):
    """Read-only access to topics and their summaries."""

    def exists(self, topic_id: TopicId) -> bool:
        """Whether the topic exists."""
        ...

    def find_summary_ids(self, topic_id: TopicId) -> list[SummaryId]:
        """Get the ids of the summaries belonging to a topic."""
        ...

    def find_summary_topic_id(self, summary_id: SummaryId) -> TopicId | None:
        """Get the topic a summary belongs to, None if the summary does not exist."""
        ...
