"""Decision entity.

A decision marks a comment as handled by a moderator. It deliberately does
not record whether the comment was approved or removed: presence of the row
is the whole meaning.
"""

from typing import Optional

from trasher.domain.model.common import DomainModel
from trasher.domain.value import CommentId, DecisionId


class Decision(DomainModel):
    """Decision entity.

    Business rules:
    - At most one decision per comment (enforced by a unique constraint)
    - Never updated in place: created by remove/approve, deleted by cancel
    """

    comment_id: CommentId
    id: Optional[DecisionId] = None  # Assigned by the database
