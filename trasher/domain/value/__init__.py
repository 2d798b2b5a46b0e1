"""Domain value objects for Trasher."""

from trasher.domain.value.identifiers import CommentId, DecisionId, PostId
from trasher.domain.value.types import CommentStatus, Transition

__all__ = [
    # Identifiers
    "CommentId",
    "PostId",
    "DecisionId",
    # Types
    "CommentStatus",
    "Transition",
]
