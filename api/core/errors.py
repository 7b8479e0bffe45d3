"""
Error kinds shared by the storage and serving layers.

Repositories raise the `StoreError` subclasses; services turn every error
here into an `HTTPException` with `to_http_exception`.
"""

from __future__ import annotations

from fastapi import HTTPException, status


class StoreError(RuntimeError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class DuplicateKey(StoreError):
    status_code = status.HTTP_409_CONFLICT


class ForeignKeyViolation(StoreError):
    status_code = status.HTTP_409_CONFLICT


class NotFound(StoreError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidInput(ValueError):
    status_code = status.HTTP_400_BAD_REQUEST


def to_http_exception(exc: StoreError | InvalidInput) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=str(exc))
