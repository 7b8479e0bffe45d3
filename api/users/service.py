"""
User registration logic.
"""

from __future__ import annotations

import logging

from core import errors, validation

from . import repository

logger = logging.getLogger(__name__)


async def register(raw_username: str) -> str:
    try:
        username = validation.clean_username(raw_username)
        await repository.register(username)
    except (errors.StoreError, errors.InvalidInput) as exc:
        logger.info("register_rejected reason=%s", type(exc).__name__)
        raise errors.to_http_exception(exc) from exc

    logger.info("user_registered username=%s", username)
    return username
