"""Initial tables: user_progress, translation_history, vocab.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "user_progress",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("cards_studied", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("study_streak", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("mastered_words_json", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("last_studied", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_user_progress_user_id"), "user_progress", ["user_id"], unique=True)

    op.create_table(
        "translation_history",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("source_text", sa.Text(), nullable=False),
        sa.Column("translated_text", sa.Text(), nullable=False),
        sa.Column("source_lang", sa.String(16), nullable=False, server_default="en"),
        sa.Column("target_lang", sa.String(16), nullable=False, server_default="la"),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_translation_history_user_id"), "translation_history", ["user_id"], unique=False)
    op.create_index(op.f("ix_translation_history_timestamp"), "translation_history", ["timestamp"], unique=False)

    op.create_table(
        "vocab",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("latin", sa.String(255), nullable=False),
        sa.Column("english", sa.String(255), nullable=False),
        sa.Column("gender", sa.String(8), nullable=True),
        sa.Column("part_of_speech", sa.String(32), nullable=True),
        sa.Column("declension", sa.String(16), nullable=True),
        sa.Column("difficulty", sa.String(32), nullable=False, server_default="beginner"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_vocab_part_of_speech"), "vocab", ["part_of_speech"], unique=False)
    op.create_index(op.f("ix_vocab_declension"), "vocab", ["declension"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_vocab_declension"), table_name="vocab")
    op.drop_index(op.f("ix_vocab_part_of_speech"), table_name="vocab")
    op.drop_table("vocab")
    op.drop_index(op.f("ix_translation_history_timestamp"), table_name="translation_history")
    op.drop_index(op.f("ix_translation_history_user_id"), table_name="translation_history")
    op.drop_table("translation_history")
    op.drop_index(op.f("ix_user_progress_user_id"), table_name="user_progress")
    op.drop_table("user_progress")
