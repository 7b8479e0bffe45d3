"""
User persistence helpers.
"""

from __future__ import annotations

import asyncpg

from core import db, errors


async def register(username: str) -> None:
    try:
        await db.execute(
            """
            INSERT INTO "user" (username)
            VALUES ($1)
            """,
            username,
        )
    except asyncpg.UniqueViolationError as exc:
        raise errors.DuplicateKey(f"User `{username}` is already registered.") from exc

