"""In-memory decision repository for testing."""

from typing import Optional

from trasher.domain.model.decision import Decision
from trasher.domain.repository.decision import DecisionRepository
from trasher.domain.value import CommentId, DecisionId


class InMemoryDecisionRepository(DecisionRepository):
    """In-memory implementation of DecisionRepository for testing."""

    def __init__(self) -> None:
        self._decisions: dict[CommentId, Decision] = {}
        self._next_id = 1

    async def ensure_storage(self) -> None:
        """Nothing to create in memory."""
        pass

    async def find_by_comment(self, comment_id: CommentId) -> Optional[Decision]:
        """Find the decision recorded for a comment."""
        return self._decisions.get(comment_id)

    async def add(self, comment_id: CommentId) -> bool:
        """Record a decision, ignoring an existing one."""
        if comment_id in self._decisions:
            return False
        self._decisions[comment_id] = Decision(
            id=DecisionId(self._next_id), comment_id=comment_id
        )
        self._next_id += 1
        return True

    async def discard(self, comment_id: CommentId) -> bool:
        """Delete the decision for a comment if present."""
        return self._decisions.pop(comment_id, None) is not None

    async def count(self) -> int:
        """Count recorded decisions."""
        return len(self._decisions)
