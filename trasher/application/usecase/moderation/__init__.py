"""Moderation use cases."""

from .get_queue import GetQueueRequest, GetQueueResponse, GetQueueUseCase, QueueItem
from .moderate_comment import (
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)

__all__ = [
    "GetQueueRequest",
    "GetQueueResponse",
    "GetQueueUseCase",
    "QueueItem",
    "ModerateCommentRequest",
    "ModerateCommentResponse",
    "ModerateCommentUseCase",
]
