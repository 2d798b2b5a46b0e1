"""PostgreSQL implementation of Comment repository."""

from typing import AsyncIterator, Optional

from sqlalchemy import Select, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from trasher.domain.model import Comment
from trasher.domain.repository import CommentRepository
from trasher.domain.value import CommentId, CommentStatus
from trasher.persistence.mappers import row_to_comment
from trasher.persistence.tables import comments_table, trasher_table

# Rows fetched per round trip while streaming the queue
STREAM_BATCH_SIZE = 500


def pending_comments_query() -> Select:
    """Visible comments without a decision row, newest first."""
    joined = comments_table.outerjoin(
        trasher_table, trasher_table.c.comment_id == comments_table.c.id
    )
    return (
        select(
            comments_table.c.id,
            comments_table.c.parent,
            comments_table.c.post_id,
            comments_table.c.content,
            comments_table.c.created,
            comments_table.c.status,
        )
        .select_from(joined)
        .where(comments_table.c.status == CommentStatus.VISIBLE.value)
        .where(trasher_table.c.comment_id.is_(None))
        .order_by(desc(comments_table.c.created))
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def stream_pending(self) -> AsyncIterator[Comment]:
        """Stream pending comments newest first using a server-side cursor."""
        stmt = pending_comments_query().execution_options(yield_per=STREAM_BATCH_SIZE)
        result = await self.session.stream(stmt)
        try:
            async for row in result:
                yield row_to_comment(row._asdict())
        finally:
            await result.close()

    async def set_status(self, comment_id: CommentId, status: CommentStatus) -> bool:
        """Set the visibility status of a comment."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(status=status.value)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
