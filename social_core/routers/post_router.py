from fastapi import APIRouter, Depends
from typing import List
from ..dependencies import get_engagement_manager
from ..models import Comment
from ..schemas import CommentCreate, LikeCreate, PostCreate, PostPublic
from ..services import EngagementManager
from ..utils import map_post_to_public_dict

router = APIRouter(tags=["Post"])

@router.post("", response_model=PostPublic, status_code=201)
async def create_post(
    post_data: PostCreate,
    manager: EngagementManager = Depends(get_engagement_manager)
):
    post = await manager.create_post(post_data.authorId, post_data.content)
    return map_post_to_public_dict(post)

@router.get("/author/{author_id}", response_model=List[PostPublic])
async def get_posts_by_author(
    author_id: str,
    manager: EngagementManager = Depends(get_engagement_manager)
):
    posts = await manager.posts_by_author(author_id)
    return [map_post_to_public_dict(p) for p in posts]

@router.get("/liked/{user_id}", response_model=List[PostPublic])
async def get_liked_posts(
    user_id: str,
    manager: EngagementManager = Depends(get_engagement_manager)
):
    posts = await manager.posts_liked_by(user_id)
    return [map_post_to_public_dict(p) for p in posts]

# Thích bài đăng (idempotent)
@router.post("/{post_id}/likes", response_model=PostPublic)
async def like_post(
    post_id: str,
    like_data: LikeCreate,
    manager: EngagementManager = Depends(get_engagement_manager)
):
    post = await manager.add_like(post_id, like_data.userId)
    return map_post_to_public_dict(post)

@router.post("/{post_id}/comments", response_model=PostPublic, status_code=201)
async def comment_on_post(
    post_id: str,
    comment_data: CommentCreate,
    manager: EngagementManager = Depends(get_engagement_manager)
):
    """Thêm bình luận vào cuối danh sách bình luận của bài đăng."""
    comment = Comment(authorId=comment_data.authorId, text=comment_data.text)
    post = await manager.add_comment(post_id, comment)
    return map_post_to_public_dict(post)
