"""In-memory comment repository for testing."""

from typing import AsyncIterator, Optional

from trasher.domain.model.comment import Comment
from trasher.domain.repository.comment import CommentRepository
from trasher.domain.repository.decision import DecisionRepository
from trasher.domain.value import CommentId, CommentStatus


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    The pending query joins against decisions, so the repository is given
    the decision repository it should consult.
    """

    def __init__(self, decision_repository: DecisionRepository) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._decisions = decision_repository

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def stream_pending(self) -> AsyncIterator[Comment]:
        """Stream visible comments without a decision, newest first."""
        # Snapshot so writes during iteration don't affect this read
        comments = sorted(
            self._comments.values(), key=lambda c: c.created, reverse=True
        )
        for comment in comments:
            if comment.status != CommentStatus.VISIBLE:
                continue
            if await self._decisions.find_by_comment(comment.id) is not None:
                continue
            yield comment

    async def set_status(self, comment_id: CommentId, status: CommentStatus) -> bool:
        """Set the visibility status of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return False
        self._comments[comment_id] = comment.with_status(status)
        return True

    async def save(self, comment: Comment) -> Comment:
        """Seed or replace a comment.

        Comments are created by the site; this only exists so tests can
        populate the store.
        """
        self._comments[comment.id] = comment
        return comment
