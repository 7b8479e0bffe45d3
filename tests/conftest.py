from __future__ import annotations

import os

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from comments import repository as comments_repository
from core import db, errors
from interactions import repository as interactions_repository
from main import app
from posts import repository as posts_repository
from users import repository as users_repository


class MemoryStore:
    """In-memory stand-in for the repository functions, with the same error behavior."""

    def __init__(self) -> None:
        self.users: set[str] = set()
        self.posts: dict[int, dict] = {}
        self.interactions: list[dict] = []
        self.comments: list[dict] = []
        self._next_post_id = 1

    async def register(self, username: str) -> None:
        if username in self.users:
            raise errors.DuplicateKey(f"User `{username}` is already registered.")
        self.users.add(username)

    async def create_post(self, username: str, content: str) -> int:
        if username not in self.users:
            raise errors.ForeignKeyViolation(f"User `{username}` is not registered.")
        post_id = self._next_post_id
        self._next_post_id += 1
        self.posts[post_id] = {"post_id": post_id, "content": content, "username": username}
        return post_id

    async def get_post(self, post_id: int) -> dict | None:
        return self.posts.get(post_id)

    async def get_feed(self) -> list[dict]:
        return [self.posts[k] for k in sorted(self.posts, reverse=True)]

    async def get_post_with_comments(self, post_id: int) -> tuple[dict, list[dict]]:
        if post_id not in self.posts:
            raise errors.NotFound(f"Post with id `{post_id}` doesn't exist.")
        return self.posts[post_id], [c for c in self.comments if c["post_id"] == post_id]

    async def record_interaction(self, post_id: int, username: str, like_not_dislike: bool) -> None:
        if post_id not in self.posts or username not in self.users:
            raise errors.ForeignKeyViolation(f"Post `{post_id}` or user `{username}` doesn't exist.")
        self.interactions.append(
            {"post_id": post_id, "username": username, "like_not_dislike": like_not_dislike}
        )

    async def list_interactions(self, post_id: int) -> list[dict]:
        return [i for i in self.interactions if i["post_id"] == post_id]

    async def get_reactions(self, post_id: int) -> tuple[list[str], list[str]]:
        latest: dict[str, bool] = {}
        for row in await self.list_interactions(post_id):
            latest[row["username"]] = row["like_not_dislike"]
        names = sorted(latest)
        return [n for n in names if latest[n]], [n for n in names if not latest[n]]

    async def clear_interactions(self, post_id: int, username: str) -> int:
        kept = [
            i for i in self.interactions
            if not (i["post_id"] == post_id and i["username"] == username)
        ]
        removed = len(self.interactions) - len(kept)
        self.interactions = kept
        return removed

    async def add_comment(self, post_id: int, username: str, content: str) -> None:
        if post_id not in self.posts:
            raise errors.ForeignKeyViolation(f"Post with id `{post_id}` doesn't exist.")
        self.comments.append({"post_id": post_id, "username": username, "content": content})

    def install(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(users_repository, "register", self.register)
        monkeypatch.setattr(posts_repository, "create_post", self.create_post)
        monkeypatch.setattr(posts_repository, "get_post", self.get_post)
        monkeypatch.setattr(posts_repository, "get_feed", self.get_feed)
        monkeypatch.setattr(posts_repository, "get_post_with_comments", self.get_post_with_comments)
        monkeypatch.setattr(interactions_repository, "record_interaction", self.record_interaction)
        monkeypatch.setattr(interactions_repository, "list_interactions", self.list_interactions)
        monkeypatch.setattr(interactions_repository, "get_reactions", self.get_reactions)
        monkeypatch.setattr(interactions_repository, "clear_interactions", self.clear_interactions)
        monkeypatch.setattr(comments_repository, "add_comment", self.add_comment)


@pytest.fixture
def memory_store(monkeypatch: pytest.MonkeyPatch) -> MemoryStore:
    store = MemoryStore()
    store.install(monkeypatch)
    return store


@pytest.fixture
def client(memory_store: MemoryStore) -> TestClient:
    # Not used as a context manager, so the lifespan (and the DB pool) never starts.
    return TestClient(app)


@pytest.fixture(scope="session")
def postgres_dsn(tmp_path_factory: pytest.TempPathFactory):
    """
    DSN of the PostgreSQL server used by the storage tests.

    TEST_DATABASE_URL wins when set; otherwise a throwaway server is started
    with pgserver for the whole session.
    """
    dsn = os.environ.get("TEST_DATABASE_URL", "").strip()
    if dsn:
        yield dsn
        return

    pgserver = pytest.importorskip("pgserver")
    server = pgserver.get_server(tmp_path_factory.mktemp("pgdata"), cleanup_mode="stop")
    try:
        yield server.get_uri()
    finally:
        server.cleanup()


@pytest_asyncio.fixture
async def database(postgres_dsn: str):
    """
    Fresh schema for every test.
    """
    await db.init_pool(postgres_dsn)
    try:
        await db.execute('DROP TABLE IF EXISTS comment, interaction, post, "user"')
        await db.apply_schema()
        yield db.pool()
    finally:
        await db.close_pool()
