"""SQLAlchemy session transaction."""

from sqlalchemy.ext.asyncio import AsyncSession

from trasher.domain.repository import Transaction


class SessionTransaction(Transaction):
    """Transaction backed by the request's AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        """Commit the session."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Roll back the session."""
        await self.session.rollback()
