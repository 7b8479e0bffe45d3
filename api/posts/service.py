"""
Post business logic: creating posts, the feed and single-post pages.
"""

from __future__ import annotations

import logging

from core import errors, validation
from interactions import repository as interactions_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_post(row: dict) -> schemas.Post:
    return schemas.Post(
        post_id=int(row["post_id"]),
        content=str(row["content"]),
        username=str(row["username"]),
    )


def _to_comment(row: dict) -> schemas.Comment:
    return schemas.Comment(
        post_id=int(row["post_id"]),
        username=str(row["username"]),
        content=str(row["content"]),
    )


async def create_post(raw_username: str, raw_content: str) -> int:
    try:
        username = validation.clean_username(raw_username)
        content = validation.clean_content(raw_content)
        post_id = await repository.create_post(username, content)
    except (errors.StoreError, errors.InvalidInput) as exc:
        logger.info("create_post_rejected reason=%s", type(exc).__name__)
        raise errors.to_http_exception(exc) from exc

    logger.info("post_created post_id=%s username=%s", post_id, username)
    return post_id


async def feed() -> list[schemas.Post]:
    rows = await repository.get_feed()
    return [_to_post(row) for row in rows]


async def post_detail(raw_post_id: str | int) -> schemas.PostDetail:
    try:
        post_id = validation.parse_post_id(raw_post_id)
        post_row, comment_rows = await repository.get_post_with_comments(post_id)
    except (errors.StoreError, errors.InvalidInput) as exc:
        raise errors.to_http_exception(exc) from exc

    likers, dislikers = await interactions_repository.get_reactions(post_id)
    return schemas.PostDetail(
        post=_to_post(post_row),
        comments=[_to_comment(row) for row in comment_rows],
        likers=likers,
        dislikers=dislikers,
    )
