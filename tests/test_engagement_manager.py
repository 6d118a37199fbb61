import asyncio
from datetime import datetime

import pytest

from social_core.exceptions import NotFoundError
from social_core.models import Comment
from social_core.services import EngagementManager

from .conftest import assert_recent


async def test_create_post_starts_without_engagement(store):
    manager = EngagementManager(store)

    post = await manager.create_post("u1", "Xin chào")

    stored = await store.load("posts", post.id)
    assert stored.authorId == "u1"
    assert stored.likes == []
    assert stored.comments == []


async def test_add_like_twice_counts_once(store):
    manager = EngagementManager(store)
    post = await manager.create_post("u1", "p1")

    await manager.add_like(post.id, "u5")
    liked = await manager.add_like(post.id, "u5")

    assert liked.likes == ["u5"]


async def test_likes_from_different_users_accumulate(store):
    manager = EngagementManager(store)
    post = await manager.create_post("u1", "p1")

    await asyncio.gather(
        manager.add_like(post.id, "u2"),
        manager.add_like(post.id, "u3"),
        manager.add_like(post.id, "u2"),
    )

    stored = await store.load("posts", post.id)
    assert sorted(stored.likes) == ["u2", "u3"]


async def test_add_like_to_missing_post_is_not_found(store):
    manager = EngagementManager(store)

    with pytest.raises(NotFoundError):
        await manager.add_like("missing", "u5")


async def test_add_comment_appends_and_stamps_time(store):
    manager = EngagementManager(store)
    post = await manager.create_post("u1", "p1")
    started = datetime.utcnow()

    updated = await manager.add_comment(post.id, Comment(authorId="u5", text="hi"))

    assert len(updated.comments) == 1
    last = updated.comments[-1]
    assert last.authorId == "u5"
    assert last.text == "hi"
    assert last.id
    assert_recent(last.createdAt, started)


async def test_add_comment_ignores_client_timestamp(store):
    manager = EngagementManager(store)
    post = await manager.create_post("u1", "p1")
    started = datetime.utcnow()

    updated = await manager.add_comment(
        post.id, Comment(authorId="u5", text="hi", createdAt=datetime(2001, 1, 1))
    )

    assert_recent(updated.comments[-1].createdAt, started)


async def test_comments_keep_call_order(store):
    manager = EngagementManager(store)
    post = await manager.create_post("u1", "p1")
    await manager.add_comment(post.id, Comment(authorId="u2", text="first"))

    for i in range(3):
        updated = await manager.add_comment(post.id, Comment(authorId="u3", text=f"reply {i}"))

    assert [c.text for c in updated.comments] == ["first", "reply 0", "reply 1", "reply 2"]


async def test_add_comment_to_missing_post_is_not_found(store):
    manager = EngagementManager(store)

    with pytest.raises(NotFoundError):
        await manager.add_comment("missing", Comment(authorId="u5", text="hi"))


async def test_posts_by_author_and_liked_by(store):
    manager = EngagementManager(store)
    mine = await manager.create_post("u1", "mine")
    other = await manager.create_post("u2", "other")
    await manager.add_like(other.id, "u1")

    assert [p.id for p in await manager.posts_by_author("u1")] == [mine.id]
    assert [p.id for p in await manager.posts_liked_by("u1")] == [other.id]
    assert await manager.posts_liked_by("u9") == []
