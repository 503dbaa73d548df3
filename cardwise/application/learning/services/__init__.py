"""Application services of the learning context."""

from .bundle_cache import BundleCache
from .due_set_aggregator import DueSetAggregator, partition_due
from .identity_resolver import IdentityResolver
from .topic_invalidator import TopicInvalidator

__all__ = [
    "BundleCache",
    "DueSetAggregator",
    "IdentityResolver",
    "TopicInvalidator",
    "partition_due",
]
