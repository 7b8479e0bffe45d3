"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from . import service

router = APIRouter()


@router.get("/register/{username}")
async def register_user(username: str) -> RedirectResponse:
    await service.register(username)
    return RedirectResponse("/feed", status_code=status.HTTP_303_SEE_OTHER)
