"""Decision repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from trasher.domain.model.decision import Decision
from trasher.domain.value import CommentId


class DecisionRepository(ABC):
    """Repository for Decision entity.

    Decisions are append/delete only. Both writes are idempotent so that
    repeating a transition never fails.
    """

    @abstractmethod
    async def ensure_storage(self) -> None:
        """Make sure the decision table exists before it is used.

        Implementations create it at most once per process and retry on the
        next call if creating it failed.
        """
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> Optional[Decision]:
        """Find the decision recorded for a comment.

        Args:
            comment_id: The comment ID

        Returns:
            The decision if the comment was handled, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, comment_id: CommentId) -> bool:
        """Record a decision for a comment (insert-or-ignore).

        Args:
            comment_id: The comment ID

        Returns:
            True if a row was inserted, False if one already existed
        """
        pass

    @abstractmethod
    async def discard(self, comment_id: CommentId) -> bool:
        """Delete the decision for a comment if present.

        Args:
            comment_id: The comment ID

        Returns:
            True if a row was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count recorded decisions.

        Returns:
            Number of decision rows
        """
        pass
