"""
Like / dislike / unlike logic.
"""

from __future__ import annotations

import logging

from core import errors, validation
from posts import repository as posts_repository

from . import repository

logger = logging.getLogger(__name__)


async def interact(raw_post_id: str, raw_username: str, *, like_not_dislike: bool) -> int:
    """
    Record a like (True) or dislike (False) and return the post id.
    """
    try:
        post_id = validation.parse_post_id(raw_post_id)
        username = validation.clean_username(raw_username)
        await repository.record_interaction(post_id, username, like_not_dislike)
    except (errors.StoreError, errors.InvalidInput) as exc:
        logger.info("interaction_rejected reason=%s", type(exc).__name__)
        raise errors.to_http_exception(exc) from exc

    logger.info(
        "interaction_recorded post_id=%s username=%s like=%s",
        post_id,
        username,
        like_not_dislike,
    )
    return post_id


async def unlike(raw_post_id: str, raw_username: str) -> int:
    try:
        post_id = validation.parse_post_id(raw_post_id)
        username = validation.clean_username(raw_username)
        if await posts_repository.get_post(post_id) is None:
            raise errors.NotFound(f"Post with id `{post_id}` doesn't exist.")
        removed = await repository.clear_interactions(post_id, username)
    except (errors.StoreError, errors.InvalidInput) as exc:
        logger.info("unlike_rejected reason=%s", type(exc).__name__)
        raise errors.to_http_exception(exc) from exc

    logger.info("interactions_cleared post_id=%s username=%s removed=%s", post_id, username, removed)
    return post_id


async def list_for_post(raw_post_id: str) -> dict:
    """
    Every recorded like/dislike on a post, oldest first.
    """
    try:
        post_id = validation.parse_post_id(raw_post_id)
        if await posts_repository.get_post(post_id) is None:
            raise errors.NotFound(f"Post with id `{post_id}` doesn't exist.")
    except (errors.StoreError, errors.InvalidInput) as exc:
        raise errors.to_http_exception(exc) from exc

    rows = await repository.list_interactions(post_id)
    interactions = [
        {
            "username": str(row["username"]),
            "like_not_dislike": bool(row["like_not_dislike"]),
        }
        for row in rows
    ]
    return {"post_id": post_id, "interactions": interactions, "count": len(interactions)}
