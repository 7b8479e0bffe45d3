"""
Post and comment models rendered by the post pages.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Post(BaseModel):
    post_id: int
    content: str
    username: str


class Comment(BaseModel):
    post_id: int
    username: str
    content: str


class PostDetail(BaseModel):
    post: Post
    comments: list[Comment] = Field(default_factory=list)
    likers: list[str] = Field(default_factory=list)
    dislikers: list[str] = Field(default_factory=list)
