"""Domain model entities for Trasher."""

from trasher.domain.model.comment import Comment
from trasher.domain.model.decision import Decision
from trasher.domain.model.flagged_comment import FlaggedComment

__all__ = [
    "Comment",
    "Decision",
    "FlaggedComment",
]
