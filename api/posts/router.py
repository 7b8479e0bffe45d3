"""
Post API endpoints: feed, single post, new post.
"""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse, RedirectResponse

from . import service, views

router = APIRouter()


@router.get("/feed", response_class=HTMLResponse)
async def feed() -> HTMLResponse:
    posts = await service.feed()
    return HTMLResponse(views.render_feed_page(posts))


@router.get("/post/{post_id}", response_class=HTMLResponse)
async def one_post(post_id: str) -> HTMLResponse:
    detail = await service.post_detail(post_id)
    return HTMLResponse(views.render_post_page(detail))


@router.get("/post/{username}/{post_id}", response_class=HTMLResponse)
async def one_post_by_author(username: str, post_id: str) -> HTMLResponse:
    """
    Older links carry the author's username; the post id alone identifies the post.
    """
    detail = await service.post_detail(post_id)
    return HTMLResponse(views.render_post_page(detail))


@router.get("/new-post/{username}/{content}")
async def create_post(username: str, content: str) -> RedirectResponse:
    post_id = await service.create_post(username, content)
    return RedirectResponse(f"/post/{post_id}", status_code=status.HTTP_303_SEE_OTHER)
