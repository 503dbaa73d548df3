"""Short-lived read-through cache of topic bundles."""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

import structlog

from cardwise.application.learning.use_cases.dtos import Bundle
from cardwise.domain.common.clock import Clock, utc_now
from cardwise.domain.common.value_objects import TopicId, UserId

logger = structlog.get_logger(__name__)

DEFAULT_TTL = timedelta(seconds=60)

BundleLoader = Callable[[TopicId, UserId], Bundle]
CacheKey = tuple[TopicId, UserId]


@dataclass(frozen=True)
class CacheEntry:
    payload: Bundle
    written_at: datetime


class BundleCache:
    """
    Per-(topic, user) TTL cache in front of the bundle aggregation.

    An entry is served while its age is below ``ttl`` and is a miss from then
    on, whether or not it is still stored. A miss runs the loader outside the
    lock, so slow loads never hold up other keys; if the loader raises,
    nothing is stored and the error propagates. Invalidation is topic-wide,
    across all users of the topic.

    A load that started before an invalidation of its topic is returned to
    its caller but not stored.
    """

    def __init__(self, ttl: timedelta = DEFAULT_TTL, clock: Clock = utc_now) -> None:
        if ttl <= timedelta(0):
            raise ValueError("Cache TTL must be positive")
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[CacheKey, CacheEntry] = {}
        self._generations: dict[TopicId, int] = {}

    def get(self, topic_id: TopicId, user_id: UserId, loader: BundleLoader) -> Bundle:
        """
        Return the cached bundle, loading and storing it on a miss.

        Args:
            topic_id: Topic of the bundle
            user_id: User the scheduling state belongs to
            loader: Computes the bundle from the authoritative stores

        Returns:
            A bundle no older than ``ttl``
        """
        key = (topic_id, user_id)
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            generation = self._generations.get(topic_id, 0)

        if entry is not None and now - entry.written_at < self.ttl:
            logger.debug("bundle_cache_hit", topic_id=topic_id.value, user_id=user_id.value)
            return entry.payload

        logger.debug(
            "bundle_cache_miss",
            topic_id=topic_id.value,
            user_id=user_id.value,
            expired=entry is not None,
        )
        payload = loader(topic_id, user_id)

        with self._lock:
            if self._generations.get(topic_id, 0) == generation:
                self._entries[key] = CacheEntry(payload=payload, written_at=self._clock())
            else:
                logger.debug(
                    "bundle_cache_store_skipped",
                    topic_id=topic_id.value,
                    user_id=user_id.value,
                )
        return payload

    def invalidate(self, topic_id: TopicId) -> int:
        """
        Drop every entry of a topic.

        Returns:
            Number of entries removed
        """
        with self._lock:
            self._generations[topic_id] = self._generations.get(topic_id, 0) + 1
            stale = [key for key in self._entries if key[0] == topic_id]
            for key in stale:
                del self._entries[key]

        if stale:
            logger.info("bundle_cache_invalidated", topic_id=topic_id.value, entries=len(stale))
        return len(stale)
