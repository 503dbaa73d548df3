"""Repository for the topic/summary structure."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from cardwise.domain.common.value_objects import SummaryId, TopicId
from cardwise.models import Summary as SummaryORM
from cardwise.models import Topic as TopicORM


class TopicRepository:
    """Read-only access to topics and their summaries."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def exists(self, topic_id: TopicId) -> bool:
        stmt = select(TopicORM.id).where(TopicORM.id == topic_id.value)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def find_summary_ids(self, topic_id: TopicId) -> list[SummaryId]:
        stmt = (
            select(SummaryORM.id)
            .where(SummaryORM.topic_id == topic_id.value)
            .order_by(SummaryORM.id.asc())
        )
        return [SummaryId(summary_id) for summary_id in self.db.execute(stmt).scalars().all()]

    def find_summary_topic_id(self, summary_id: SummaryId) -> TopicId | None:
        stmt = select(SummaryORM.topic_id).where(SummaryORM.id == summary_id.value)
        topic_id = self.db.execute(stmt).scalar_one_or_none()
        return TopicId(topic_id) if topic_id is not None else None
