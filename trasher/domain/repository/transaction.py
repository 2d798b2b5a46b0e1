"""Transaction boundary shared by the comment and decision repositories."""

from abc import ABC, abstractmethod


class Transaction(ABC):
    """Unit of work over the stores used in one request.

    Both repositories write through the same connection, so committing or
    rolling back here applies to the comment status and the decision row
    together.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit pending writes."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard pending writes."""
        pass
