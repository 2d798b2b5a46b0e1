"""Moderate comment use case."""

import logfire
from pydantic import BaseModel, StrictInt

from trasher.application.usecase.base import BaseUseCase
from trasher.domain.error import ModerationFailedError
from trasher.domain.service import ModerationService
from trasher.domain.value import CommentId, Transition


class ModerateCommentRequest(BaseModel):
    """Moderation command sent by the queue page.

    ``status`` is kept as a plain string: unknown values are accepted and
    ignored rather than rejected. ``id`` is an integer or its string form;
    booleans and floats are rejected.
    """

    status: str
    id: StrictInt | str


class ModerateCommentResponse(BaseModel):
    """Moderation command response."""

    success: bool


class ModerateCommentUseCase(BaseUseCase):
    """Use case for removing, approving or restoring a comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize moderate comment use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: ModerateCommentRequest) -> ModerateCommentResponse:
        """Execute moderation command.

        Args:
            request: Command with status and comment ID

        Returns:
            success=False only when the stores failed or the ID is not a
            comment ID; unknown statuses succeed without doing anything
        """
        try:
            transition = Transition(request.status)
        except ValueError:
            logfire.info("Ignoring unknown moderation status", status=request.status)
            return ModerateCommentResponse(success=True)

        try:
            comment_id = CommentId(int(request.id))
        except ValueError:
            logfire.warn("Invalid comment id in moderation command", id=str(request.id))
            return ModerateCommentResponse(success=False)

        try:
            await self.moderation_service.apply(transition, comment_id)
        except ModerationFailedError:
            return ModerateCommentResponse(success=False)

        return ModerateCommentResponse(success=True)
