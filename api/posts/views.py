"""
HTML rendering for the feed and post pages.

Every user-supplied string goes through `html.escape` before it is written.
"""

from __future__ import annotations

from html import escape

from . import schemas

HEADER = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta http-equiv="Content-Type" content="text/html; charset=utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>Social</title>
</head>
<body>
    <h1>Social</h1>
"""

FOOTER = """</body>
</html>
"""


def _quoted_names(usernames: list[str]) -> str:
    return " ".join(f"&quot;{escape(name)}&quot;" for name in usernames)


def _interaction_form(action: str, label: str, post: schemas.Post) -> str:
    return f"""
    <form action="/{action}" method="GET">
        <input hidden name="post_username" value="{escape(post.username)}"/>
        <input hidden name="post_id" value="{post.post_id}"/>
        <input name="username" placeholder="Username"/>
        <input type="submit" value="{label}"/>
    </form>"""


def render_post_body(detail: schemas.PostDetail) -> str:
    post = detail.post
    comments = "".join(
        f"\n        <li><b>@{escape(c.username)} says:</b> {escape(c.content)}</li>"
        for c in detail.comments
    )
    return f"""
    <h2>Post by @{escape(post.username)}</h2>
    <h4>{escape(post.content)}</h4>
    <p>Liked by {_quoted_names(detail.likers)}</p>
    <p>Disliked by {_quoted_names(detail.dislikers)}</p>
    <h4>Comments</h4>
    <ul>{comments}
        <li>
            <form action="/add-comment" method="GET">
                <input hidden name="post_username" value="{escape(post.username)}"/>
                <input hidden name="post_id" value="{post.post_id}"/>
                <input name="username" placeholder="Username"/>
                <input name="comment" placeholder="Your Comment"/>
                <input type="submit" value="Add Comment"/>
            </form>
        </li>
    </ul>
{_interaction_form("like", "Like", post)}
{_interaction_form("dislike", "Dislike", post)}
{_interaction_form("unlike", "Unlike", post)}
    <h5><a href="/feed">Back to Feed</a></h5>
"""


def render_post_page(detail: schemas.PostDetail) -> str:
    return HEADER + render_post_body(detail) + FOOTER


def render_feed_page(posts: list[schemas.Post]) -> str:
    if not posts:
        items = "\n        <p>No posts yet.</p>"
    else:
        items = "".join(
            f"""
        <a href="/post/{post.post_id}"><div>
            <h2>Post by @{escape(post.username)}</h2>
            <h4>{escape(post.content)}</h4>
        </div></a>"""
            for post in posts
        )
    return HEADER + f'    <div id="posts" style="border: solid 1px black;">{items}\n    </div>\n' + FOOTER
