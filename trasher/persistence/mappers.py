"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from trasher.domain.model import Comment, Decision
from trasher.domain.value import CommentId, CommentStatus, DecisionId, PostId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent = row.get("parent")
    return Comment(
        id=CommentId(int(row["id"])),
        parent=CommentId(int(parent)) if parent else None,
        post_id=PostId(int(row["post_id"])),
        content=row["content"] or "",
        created=row["created"],
        status=CommentStatus(row["status"]),
    )


def row_to_decision(row: Dict[str, Any]) -> Decision:
    """Convert database row to Decision domain model.

    Args:
        row: Database row as dict

    Returns:
        Decision domain model
    """
    return Decision(
        id=DecisionId(int(row["id"])),
        comment_id=CommentId(int(row["comment_id"])),
    )
