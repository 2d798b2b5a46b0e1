"""In-memory transaction for testing."""

from trasher.domain.repository.transaction import Transaction


class InMemoryTransaction(Transaction):
    """Records commits and rollbacks; in-memory writes are applied immediately."""

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        """Count a commit."""
        self.commits += 1

    async def rollback(self) -> None:
        """Count a rollback."""
        self.rollbacks += 1
