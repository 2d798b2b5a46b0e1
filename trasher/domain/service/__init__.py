"""Domain services."""

from .base import Service
from .moderation_service import DEFAULT_QUEUE_LIMIT, ModerationService
from .word_matcher import WordMatcher

__all__ = [
    "DEFAULT_QUEUE_LIMIT",
    "ModerationService",
    "Service",
    "WordMatcher",
]
