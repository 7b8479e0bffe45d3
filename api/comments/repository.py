"""
Comment persistence.

The comment table has no foreign key on username, so unregistered usernames
can comment. Only the post has to exist.
"""

from __future__ import annotations

import asyncpg

from core import db, errors


async def add_comment(post_id: int, username: str, content: str) -> None:
    try:
        await db.execute(
            """
            INSERT INTO comment (content, post_id, username)
            VALUES ($1, $2, $3)
            """,
            content,
            post_id,
            username,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise errors.ForeignKeyViolation(f"Post with id `{post_id}` doesn't exist.") from exc
