"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .decision import InMemoryDecisionRepository
from .transaction import InMemoryTransaction

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDecisionRepository",
    "InMemoryTransaction",
]
