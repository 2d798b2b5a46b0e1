"""Repository interfaces for the Trasher domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from trasher.domain.repository.comment import CommentRepository
from trasher.domain.repository.decision import DecisionRepository
from trasher.domain.repository.transaction import Transaction

__all__ = [
    "CommentRepository",
    "DecisionRepository",
    "Transaction",
]
