"""create trasher table

Decisions table for moderated comments. The comments table belongs to the
site and is not managed by these migrations.

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2025-11-20 10:12:44.118204

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Idempotent: the app may already have created the table on startup
    op.execute("""
        CREATE TABLE IF NOT EXISTS trasher (
            id SERIAL PRIMARY KEY,
            comment_id INTEGER NOT NULL,
            CONSTRAINT uq_trasher_comment_id UNIQUE (comment_id)
        )
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TABLE IF EXISTS trasher")
