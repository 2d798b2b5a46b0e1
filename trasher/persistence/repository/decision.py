"""PostgreSQL implementation of Decision repository."""

from typing import Optional

from sqlalchemy import Delete, Insert, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from trasher.domain.model import Decision
from trasher.domain.repository import DecisionRepository
from trasher.domain.value import CommentId
from trasher.persistence.database import SchemaInitializer
from trasher.persistence.mappers import row_to_decision
from trasher.persistence.tables import trasher_table


def add_decision_statement(comment_id: CommentId) -> Insert:
    """INSERT ... ON CONFLICT DO NOTHING for a comment's decision."""
    return (
        insert(trasher_table)
        .values(comment_id=comment_id)
        .on_conflict_do_nothing(index_elements=[trasher_table.c.comment_id])
    )


def discard_decision_statement(comment_id: CommentId) -> Delete:
    """DELETE of a comment's decision, matching zero or one row."""
    return delete(trasher_table).where(trasher_table.c.comment_id == comment_id)


class PostgresDecisionRepository(DecisionRepository):
    """PostgreSQL implementation of DecisionRepository."""

    def __init__(
        self, session: AsyncSession, schema: Optional[SchemaInitializer] = None
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            schema: Creates the decisions table on first use, if configured
        """
        self.session = session
        self.schema = schema

    async def ensure_storage(self) -> None:
        """Create the decisions table on first use."""
        if self.schema is not None:
            await self.schema.ensure()

    async def find_by_comment(self, comment_id: CommentId) -> Optional[Decision]:
        """Find the decision recorded for a comment."""
        stmt = select(trasher_table).where(trasher_table.c.comment_id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_decision(row._asdict()) if row else None

    async def add(self, comment_id: CommentId) -> bool:
        """Record a decision, ignoring an existing one."""
        result = await self.session.execute(add_decision_statement(comment_id))
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def discard(self, comment_id: CommentId) -> bool:
        """Delete the decision for a comment if present."""
        result = await self.session.execute(discard_decision_statement(comment_id))
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count(self) -> int:
        """Count recorded decisions."""
        stmt = select(func.count()).select_from(trasher_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
