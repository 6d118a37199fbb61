from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime

class PostCreate(BaseModel):
    authorId: str
    content: str = Field(..., description="Nội dung bài đăng")

class LikeCreate(BaseModel):
    userId: str

class CommentCreate(BaseModel):
    authorId: str
    text: str = Field(..., min_length=1, description="Nội dung bình luận")

    @field_validator('text')
    @classmethod
    def text_validation(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('Nội dung bình luận không được để trống')
        return v.strip()

class CommentPublic(BaseModel):
    id: str
    authorId: str
    text: str
    createdAt: Optional[datetime] = None

class PostPublic(BaseModel):
    id: str
    authorId: str
    content: str
    likes: List[str]
    likeCount: int
    comments: List[CommentPublic]
    createdAt: datetime
