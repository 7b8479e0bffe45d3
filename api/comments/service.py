"""
Comment logic.
"""

from __future__ import annotations

import logging

from core import errors, validation

from . import repository

logger = logging.getLogger(__name__)


async def add_comment(raw_post_id: str, raw_username: str, raw_comment: str) -> int:
    """
    Add a comment and return the id of the commented post.

    The username is not checked against registered users.
    """
    try:
        post_id = validation.parse_post_id(raw_post_id)
        username = validation.clean_username(raw_username)
        content = validation.clean_content(raw_comment, field="Comment")
        await repository.add_comment(post_id, username, content)
    except (errors.StoreError, errors.InvalidInput) as exc:
        logger.info("add_comment_rejected reason=%s", type(exc).__name__)
        raise errors.to_http_exception(exc) from exc

    logger.info("comment_added post_id=%s username=%s", post_id, username)
    return post_id
