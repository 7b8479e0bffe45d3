"""
Interaction endpoints. They are plain GETs so the forms on the post page can
submit to them.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, status
from fastapi.responses import RedirectResponse

from . import service

router = APIRouter()


def _back_to_post(post_id: int) -> RedirectResponse:
    return RedirectResponse(f"/post/{post_id}", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/like")
async def like(
    post_id: str = Query(...),
    username: str = Query(...),
) -> RedirectResponse:
    return _back_to_post(await service.interact(post_id, username, like_not_dislike=True))


@router.get("/dislike")
async def dislike(
    post_id: str = Query(...),
    username: str = Query(...),
) -> RedirectResponse:
    return _back_to_post(await service.interact(post_id, username, like_not_dislike=False))


@router.get("/unlike")
async def unlike(
    post_id: str = Query(...),
    username: str = Query(...),
) -> RedirectResponse:
    return _back_to_post(await service.unlike(post_id, username))


@router.get("/interactions")
async def list_interactions(post_id: str = Query(...)) -> dict:
    return await service.list_for_post(post_id)
