"""Moderation routes.

The page and its commands share one URL: a POST carrying a JSON object with
both ``status`` and ``id`` is a command, anything else renders the page.
"""

import json
from pathlib import Path
from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from trasher.application.usecase.moderation import (
    GetQueueRequest,
    GetQueueResponse,
    GetQueueUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)
from trasher.config import QueueSettings, SiteSettings

router = APIRouter(tags=["moderation"], route_class=DishkaRoute)

templates = Jinja2Templates(directory=Path(__file__).parent.parent / "templates")


async def read_command(request: Request) -> dict[str, Any] | None:
    """Extract a moderation command from the request body.

    Returns:
        The decoded object if it carries both ``status`` and ``id``,
        None otherwise
    """
    body = await request.body()
    if not body.strip():
        return None

    try:
        payload = json.loads(body)
    except ValueError:
        return None

    if not isinstance(payload, dict):
        return None
    if payload.get("status") is None or payload.get("id") is None:
        return None
    return payload


async def render_queue(
    request: Request,
    get_queue_use_case: GetQueueUseCase,
    queue_settings: QueueSettings,
    site_settings: SiteSettings,
) -> HTMLResponse:
    """Render the review queue page."""
    queue = await get_queue_use_case.execute(GetQueueRequest(limit=queue_settings.limit))
    return templates.TemplateResponse(
        request,
        "queue.html",
        {"queue": queue, "site": site_settings},
    )


@router.get("/", response_class=HTMLResponse)
async def queue_page(
    request: Request,
    get_queue_use_case: FromDishka[GetQueueUseCase],
    queue_settings: FromDishka[QueueSettings],
    site_settings: FromDishka[SiteSettings],
) -> HTMLResponse:
    """Show the comments that still need moderation."""
    return await render_queue(request, get_queue_use_case, queue_settings, site_settings)


@router.post("/", response_model=None)
async def moderate_comment(
    request: Request,
    get_queue_use_case: FromDishka[GetQueueUseCase],
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    queue_settings: FromDishka[QueueSettings],
    site_settings: FromDishka[SiteSettings],
) -> Response:
    """Remove, approve or restore a comment.

    Body: ``{"status": "remove" | "approve" | "cancel", "id": <comment id>}``

    Returns:
        ``{"success": bool}`` for a command; the queue page otherwise
    """
    command = await read_command(request)
    if command is None:
        return await render_queue(
            request, get_queue_use_case, queue_settings, site_settings
        )

    try:
        use_case_request = ModerateCommentRequest(
            status=str(command["status"]), id=command["id"]
        )
    except ValidationError:
        return JSONResponse(ModerateCommentResponse(success=False).model_dump())

    response = await moderate_comment_use_case.execute(use_case_request)
    return JSONResponse(response.model_dump())


@router.get("/queue", response_model=GetQueueResponse)
async def get_queue(
    get_queue_use_case: FromDishka[GetQueueUseCase],
    queue_settings: FromDishka[QueueSettings],
) -> GetQueueResponse:
    """Review queue as JSON."""
    return await get_queue_use_case.execute(GetQueueRequest(limit=queue_settings.limit))
