"""Test configuration and fixtures."""

from datetime import datetime, timedelta

from trasher.domain.model import Comment
from trasher.domain.value import CommentId, CommentStatus, PostId

BASE_TIME = datetime(2024, 3, 1, 12, 0, 0)


def make_comment(
    comment_id: int,
    content: str = "ты дурак",
    *,
    post_id: int = 100,
    parent: int | None = None,
    minutes: int | None = None,
    status: CommentStatus = CommentStatus.VISIBLE,
) -> Comment:
    """Helper to build a comment for tests.

    Args:
        comment_id: Comment ID
        content: Comment text
        post_id: Post the comment belongs to
        parent: Parent comment ID
        minutes: Minutes after BASE_TIME the comment was created
            (defaults to the comment ID, so higher IDs are newer)
        status: Visibility status

    Returns:
        Comment domain model
    """
    offset = comment_id if minutes is None else minutes
    return Comment(
        id=CommentId(comment_id),
        post_id=PostId(post_id),
        parent=CommentId(parent) if parent else None,
        content=content,
        created=BASE_TIME + timedelta(minutes=offset),
        status=status,
    )
