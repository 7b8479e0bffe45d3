"""
Post persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db, errors


async def create_post(username: str, content: str) -> int:
    """
    Insert a post authored by `username` and return its id.
    """
    try:
        post_id = await db.fetch_value(
            """
            INSERT INTO post (content, username)
            VALUES ($1, $2)
            RETURNING post_id
            """,
            content,
            username,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise errors.ForeignKeyViolation(f"User `{username}` is not registered.") from exc
    if post_id is None:
        raise RuntimeError("Failed to insert post.")
    return int(post_id)


async def get_post(post_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT post_id, content, username
        FROM post
        WHERE post_id = $1
        """,
        post_id,
    )


async def get_feed() -> list[dict[str, Any]]:
    """
    All posts, most recent first.
    """
    return await db.fetch_all(
        """
        SELECT post_id, content, username
        FROM post
        ORDER BY post_id DESC
        """
    )


async def get_post_with_comments(post_id: int) -> tuple[dict[str, Any], list[dict[str, Any]]]:
    """
    Return (post, comments) with comments in the order they were added.

    Raises NotFound when the post does not exist.
    """
    pool = db.pool()
    async with pool.acquire() as conn:  # type: asyncpg.Connection
        post = await conn.fetchrow(
            """
            SELECT post_id, content, username
            FROM post
            WHERE post_id = $1
            """,
            post_id,
        )
        if post is None:
            raise errors.NotFound(f"Post with id `{post_id}` doesn't exist.")

        comments = await conn.fetch(
            """
            SELECT post_id, username, content
            FROM comment
            WHERE post_id = $1
            ORDER BY comment_id ASC
            """,
            post_id,
        )
    return dict(post), [dict(c) for c in comments]
