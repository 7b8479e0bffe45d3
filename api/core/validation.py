"""
Route parameter validation.

Lengths mirror the column sizes in `schema.sql`. PostgreSQL text cannot hold NUL,
so it is rejected here rather than failing at insert time.
"""

from __future__ import annotations

from .errors import InvalidInput

MAX_USERNAME_LENGTH = 255
MAX_CONTENT_LENGTH = 1023
MAX_POST_ID = 2**63 - 1


def clean_username(username: str | None) -> str:
    value = (username or "").strip()
    if not value:
        raise InvalidInput("Username is required.")
    if "\x00" in value:
        raise InvalidInput("Username must not contain NUL characters.")
    if len(value) > MAX_USERNAME_LENGTH:
        raise InvalidInput(f"Username must be at most {MAX_USERNAME_LENGTH} characters.")
    return value


def clean_content(content: str | None, *, field: str = "Content") -> str:
    value = (content or "").strip()
    if not value:
        raise InvalidInput(f"{field} is required.")
    if "\x00" in value:
        raise InvalidInput(f"{field} must not contain NUL characters.")
    if len(value) > MAX_CONTENT_LENGTH:
        raise InvalidInput(f"{field} must be at most {MAX_CONTENT_LENGTH} characters.")
    return value


def parse_post_id(raw: str | int | None) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    else:
        text = str(raw or "").strip()
        # isdigit() alone accepts things like "²"
        if not (text.isascii() and text.isdigit()):
            raise InvalidInput("post_id must be a non-negative integer.")
        value = int(text)
    if value < 0 or value > MAX_POST_ID:
        raise InvalidInput("post_id is out of range.")
    return value
