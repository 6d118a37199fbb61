import logging
from datetime import datetime
from typing import List
from ..exceptions import NotFoundError
from ..models import Comment, Post
from ..store import DocumentStore

logger = logging.getLogger(__name__)

POSTS = Post.Settings.name


class EngagementManager:
    """
    Lượt thích (idempotent) và bình luận (chỉ nối thêm) trên bài đăng.
    Không bao giờ ghi vào User hay Message.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def create_post(self, author_id: str, content: str) -> Post:
        new_post = Post(authorId=author_id, content=content, createdAt=datetime.utcnow())
        saved = await self.store.save(new_post)
        logger.info(f"Post {saved.id} created by {author_id}")
        return saved

    async def add_like(self, post_id: str, user_id: str) -> Post:
        """
        Thêm lượt thích của người dùng. Thích lại lần nữa không thay đổi gì.
        """
        post = await self.store.load(POSTS, post_id)
        if not post:
            raise NotFoundError("Không tìm thấy bài đăng.")

        updated = await self.store.add_to_set(POSTS, post_id, "likes", user_id)
        if updated is None:
            raise NotFoundError("Không tìm thấy bài đăng.")
        return updated

    async def add_comment(self, post_id: str, comment: Comment) -> Post:
        """
        Gắn thời điểm tạo cho bình luận và nối vào cuối danh sách bình luận.
        """
        post = await self.store.load(POSTS, post_id)
        if not post:
            raise NotFoundError("Không tìm thấy bài đăng.")

        stamped = comment.model_copy(update={"createdAt": datetime.utcnow()})
        updated = await self.store.append(POSTS, post_id, "comments", stamped)
        if updated is None:
            raise NotFoundError("Không tìm thấy bài đăng.")
        logger.info(f"Comment {stamped.id} added to post {post_id} by {stamped.authorId}")
        return updated

    async def posts_by_author(self, author_id: str) -> List[Post]:
        return await self.store.query_by_field(POSTS, authorId=author_id)

    async def posts_liked_by(self, user_id: str) -> List[Post]:
        # likes là mảng: so khớp theo phần tử
        return await self.store.query_by_field(POSTS, likes=user_id)
