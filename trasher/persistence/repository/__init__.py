"""PostgreSQL repository implementations."""

from trasher.persistence.repository.comment import PostgresCommentRepository
from trasher.persistence.repository.decision import PostgresDecisionRepository
from trasher.persistence.repository.transaction import SessionTransaction

__all__ = [
    "PostgresCommentRepository",
    "PostgresDecisionRepository",
    "SessionTransaction",
]
