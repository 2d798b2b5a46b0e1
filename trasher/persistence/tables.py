"""SQLAlchemy table definitions for Trasher.

The comments table belongs to the site and is only declared here so it can be
queried. The trasher table holds moderation decisions and is owned by this
tool (see the Alembic migrations and ``ensure_schema``).
"""

from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE (owned by the site, not created or migrated here)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("parent", Integer, nullable=True),  # Comment this one replies to
    Column("post_id", Integer, nullable=False),
    Column("content", Text, nullable=False),
    Column("created", TIMESTAMP(timezone=False), nullable=False),
    Column("status", String(20), nullable=False),  # 'visible', 'removed'
)

# ============================================================================
# TRASHER TABLE (moderation decisions)
# ============================================================================
trasher_table = Table(
    "trasher",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("comment_id", Integer, nullable=False),
    UniqueConstraint("comment_id", name="uq_trasher_comment_id"),
)
