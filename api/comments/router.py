"""
Comment endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, status
from fastapi.responses import RedirectResponse

from . import service

router = APIRouter()


@router.get("/add-comment")
async def add_comment(
    post_id: str = Query(...),
    username: str = Query(...),
    comment: str = Query(...),
) -> RedirectResponse:
    post_id_value = await service.add_comment(post_id, username, comment)
    return RedirectResponse(f"/post/{post_id_value}", status_code=status.HTTP_303_SEE_OTHER)
