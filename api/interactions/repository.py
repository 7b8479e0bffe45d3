"""
Like/dislike persistence.

Every like or dislike is its own row; nothing stops a user from interacting
with the same post more than once.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db, errors


async def record_interaction(post_id: int, username: str, like_not_dislike: bool) -> None:
    try:
        await db.execute(
            """
            INSERT INTO interaction (like_not_dislike, post_id, username)
            VALUES ($1, $2, $3)
            """,
            like_not_dislike,
            post_id,
            username,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise errors.ForeignKeyViolation(
            f"Post `{post_id}` or user `{username}` doesn't exist."
        ) from exc


async def list_interactions(post_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT post_id, username, like_not_dislike
        FROM interaction
        WHERE post_id = $1
        ORDER BY interaction_id ASC
        """,
        post_id,
    )


async def get_reactions(post_id: int) -> tuple[list[str], list[str]]:
    """
    Return (likers, dislikers) for a post.

    A user's most recent interaction decides which list they appear in.
    """
    rows = await db.fetch_all(
        """
        SELECT DISTINCT ON (username) username, like_not_dislike
        FROM interaction
        WHERE post_id = $1
        ORDER BY username, interaction_id DESC
        """,
        post_id,
    )
    likers = [str(r["username"]) for r in rows if r["like_not_dislike"]]
    dislikers = [str(r["username"]) for r in rows if not r["like_not_dislike"]]
    return likers, dislikers


async def clear_interactions(post_id: int, username: str) -> int:
    """
    Remove every like/dislike `username` recorded on the post. Returns the
    number of removed rows.
    """
    status_tag = await db.execute(
        """
        DELETE FROM interaction
        WHERE post_id = $1
          AND username = $2
        """,
        post_id,
        username,
    )
    return db.affected_rows(status_tag)
