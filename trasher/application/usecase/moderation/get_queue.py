"""Get review queue use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from trasher.application.usecase.base import BaseUseCase
from trasher.config import SiteSettings
from trasher.domain.service import DEFAULT_QUEUE_LIMIT, ModerationService


class QueueItem(BaseModel):
    """Flagged comment in response."""

    id: int
    parent: int | None
    post_id: int
    content: str
    created: datetime
    matched_terms: list[str]
    motive: str
    url: str
    parent_url: str | None


class GetQueueRequest(BaseModel):
    """Get queue request."""

    limit: int = Field(default=DEFAULT_QUEUE_LIMIT, ge=1)


class GetQueueResponse(BaseModel):
    """Get queue response."""

    items: list[QueueItem]
    total: int
    limit: int


class GetQueueUseCase(BaseUseCase):
    """Use case for listing comments that still need moderation."""

    def __init__(
        self, moderation_service: ModerationService, site_settings: SiteSettings
    ) -> None:
        """Initialize get queue use case.

        Args:
            moderation_service: Moderation domain service
            site_settings: Site settings for building comment links
        """
        self.moderation_service = moderation_service
        self.site_settings = site_settings

    async def execute(self, request: GetQueueRequest) -> GetQueueResponse:
        """Execute get queue flow.

        Args:
            request: Get queue request with the cap to apply

        Returns:
            Flagged comments, newest first
        """
        flagged = await self.moderation_service.list_queue(limit=request.limit)

        items = []
        for entry in flagged:
            comment = entry.comment
            items.append(
                QueueItem(
                    id=comment.id,
                    parent=comment.parent,
                    post_id=comment.post_id,
                    content=comment.content,
                    created=comment.created,
                    matched_terms=list(entry.matched_terms),
                    motive=entry.motive,
                    url=self.site_settings.comment_url(comment.post_id, comment.id),
                    parent_url=(
                        self.site_settings.comment_url(comment.post_id, comment.parent)
                        if comment.parent
                        else None
                    ),
                )
            )

        return GetQueueResponse(items=items, total=len(items), limit=request.limit)
