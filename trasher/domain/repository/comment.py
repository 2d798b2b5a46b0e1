"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional

from trasher.domain.model.comment import Comment
from trasher.domain.value import CommentId, CommentStatus


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments live in the site's own table and are created by the site. The
    only write this tool performs is ``set_status``.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    def stream_pending(self) -> AsyncIterator[Comment]:
        """Stream comments still awaiting a decision, newest first.

        A comment is pending when its status is visible and no decision row
        exists for it. The stream is not limited; callers stop consuming
        when they have enough.

        Returns:
            Async iterator of comments ordered by ``created`` descending
        """
        pass

    @abstractmethod
    async def set_status(self, comment_id: CommentId, status: CommentStatus) -> bool:
        """Set the visibility status of a comment.

        Args:
            comment_id: The comment ID
            status: New status

        Returns:
            True if a comment was updated, False if no such comment exists
        """
        pass
