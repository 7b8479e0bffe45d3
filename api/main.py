import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse

from comments import router as comments_router
from core import db
from interactions import router as interactions_router
from posts import router as posts_router
from users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        if db.apply_schema_on_startup():
            await db.apply_schema()
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Missing or malformed route parameters are plain bad requests.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


app.include_router(users_router.router, tags=["users"])
app.include_router(posts_router.router, tags=["posts"])
app.include_router(interactions_router.router, tags=["interactions"])
app.include_router(comments_router.router, tags=["comments"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> RedirectResponse:
    return RedirectResponse("/feed", status_code=status.HTTP_303_SEE_OTHER)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


if __name__ == "__main__":
    import uvicorn

    log_level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    host = os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0"
    port = _env_int("PORT", 8000)
    logger.info("starting host=%s port=%s", host, port)
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
