"""SQLAlchemy ORM models."""

from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cardwise.database import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Topic(Base):
    """A study topic owned by one user."""

    __tablename__ = "topics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    summaries: Mapped[list["Summary"]] = relationship(
        back_populates="topic", cascade="all, delete-orphan"
    )


class Summary(Base):
    """A generated summary; its flashcards belong to the summary's topic."""

    __tablename__ = "summaries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    topic_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    topic: Mapped[Topic] = relationship(back_populates="summaries")


class Flashcard(Base):
    """A question/answer pair in one language."""

    __tablename__ = "flashcards"
    # Ids are never reused; attempts keep pointing at the ids of deleted flashcards
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    topic_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("topics.id", ondelete="CASCADE"), nullable=True, index=True
    )
    summary_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("summaries.id", ondelete="CASCADE"), nullable=True, index=True
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(String(8), nullable=False, default="pt")
    is_manual: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )


class FlashcardTranslation(Base):
    """Maps a translated flashcard to its base flashcard."""

    __tablename__ = "flashcard_translations"
    __table_args__ = (
        UniqueConstraint(
            "base_flashcard_id", "target_language", name="uq_flashcard_translations_base_lang"
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    base_flashcard_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("flashcards.id", ondelete="CASCADE"), nullable=False, index=True
    )
    translated_flashcard_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("flashcards.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    target_language: Mapped[str] = mapped_column(String(8), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )


class FlashcardAttempt(Base):
    """
    Append-only review history.

    ``flashcard_id`` always holds a base flashcard id. There is no foreign key
    so history survives flashcard deletion.
    """

    __tablename__ = "flashcard_attempts"
    __table_args__ = (
        Index(
            "ix_flashcard_attempts_user_card_date", "user_id", "flashcard_id", "attempt_date"
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    flashcard_id: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    attempt_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    ease_factor: Mapped[int] = mapped_column(Integer, nullable=False)
    interval_days: Mapped[int] = mapped_column(Integer, nullable=False)
    repetitions: Mapped[int] = mapped_column(Integer, nullable=False)
    next_review_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
