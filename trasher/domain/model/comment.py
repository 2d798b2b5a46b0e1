"""Comment entity.

Comments are owned by the site. This tool reads them and only ever changes
their visibility status.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from trasher.domain.model.common import DomainModel
from trasher.domain.value import CommentId, CommentStatus, PostId


class Comment(DomainModel):
    """Comment entity.

    - parent: comment this one replies to (display only, not a tree invariant)
    - created: used for ordering the review queue
    - status: flipped by the remove and cancel transitions
    """

    id: CommentId
    post_id: PostId
    content: str
    parent: Optional[CommentId] = None
    created: datetime = Field(default_factory=datetime.now)
    status: CommentStatus = CommentStatus.VISIBLE

    def with_status(self, status: CommentStatus) -> "Comment":
        """Return a copy of the comment with another status."""
        return self.model_copy(update={"status": status})
