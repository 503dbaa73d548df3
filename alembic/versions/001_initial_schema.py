"""Initial schema: topics, summaries, flashcards, translations and attempts.

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the learning tables."""
    op.create_table(
        "topics",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_topics_id", "topics", ["id"])
    op.create_index("ix_topics_user_id", "topics", ["user_id"])

    op.create_table(
        "summaries",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("topic_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_summaries_id", "summaries", ["id"])
    op.create_index("ix_summaries_topic_id", "summaries", ["topic_id"])

    op.create_table(
        "flashcards",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("topic_id", sa.Integer(), nullable=True),
        sa.Column("summary_id", sa.Integer(), nullable=True),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("language", sa.String(length=8), nullable=False, server_default="pt"),
        sa.Column("is_manual", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["summary_id"], ["summaries.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_flashcards_id", "flashcards", ["id"])
    op.create_index("ix_flashcards_topic_id", "flashcards", ["topic_id"])
    op.create_index("ix_flashcards_summary_id", "flashcards", ["summary_id"])

    op.create_table(
        "flashcard_translations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("base_flashcard_id", sa.Integer(), nullable=False),
        sa.Column("translated_flashcard_id", sa.Integer(), nullable=False),
        sa.Column("target_language", sa.String(length=8), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["base_flashcard_id"], ["flashcards.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["translated_flashcard_id"], ["flashcards.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("translated_flashcard_id"),
        sa.UniqueConstraint(
            "base_flashcard_id", "target_language", name="uq_flashcard_translations_base_lang"
        ),
    )
    op.create_index("ix_flashcard_translations_id", "flashcard_translations", ["id"])
    op.create_index(
        "ix_flashcard_translations_base_flashcard_id",
        "flashcard_translations",
        ["base_flashcard_id"],
    )

    # No foreign key on flashcard_id: attempt history outlives deleted flashcards
    op.create_table(
        "flashcard_attempts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("flashcard_id", sa.Integer(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("attempt_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("ease_factor", sa.Integer(), nullable=False),
        sa.Column("interval_days", sa.Integer(), nullable=False),
        sa.Column("repetitions", sa.Integer(), nullable=False),
        sa.Column("next_review_date", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_flashcard_attempts_id", "flashcard_attempts", ["id"])
    op.create_index(
        "ix_flashcard_attempts_user_card_date",
        "flashcard_attempts",
        ["user_id", "flashcard_id", "attempt_date"],
    )


def downgrade() -> None:
    """Drop the learning tables."""
    op.drop_index("ix_flashcard_attempts_user_card_date", table_name="flashcard_attempts")
    op.drop_index("ix_flashcard_attempts_id", table_name="flashcard_attempts")
    op.drop_table("flashcard_attempts")
    op.drop_index(
        "ix_flashcard_translations_base_flashcard_id", table_name="flashcard_translations"
    )
    op.drop_index("ix_flashcard_translations_id", table_name="flashcard_translations")
    op.drop_table("flashcard_translations")
    op.drop_index("ix_flashcards_summary_id", table_name="flashcards")
    op.drop_index("ix_flashcards_topic_id", table_name="flashcards")
    op.drop_index("ix_flashcards_id", table_name="flashcards")
    op.drop_table("flashcards")
    op.drop_index("ix_summaries_topic_id", table_name="summaries")
    op.drop_index("ix_summaries_id", table_name="summaries")
    op.drop_table("summaries")
    op.drop_index("ix_topics_user_id", table_name="topics")
    op.drop_index("ix_topics_id", table_name="topics")
    op.drop_table("topics")
