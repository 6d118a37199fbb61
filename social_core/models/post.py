from beanie import Document
from pydantic import Field, BaseModel
from typing import List, Optional
from datetime import datetime
from .ids import new_id

class Comment(BaseModel):
    """Bình luận nhúng trong bài đăng, bất biến sau khi tạo."""
    id: str = Field(default_factory=new_id)
    authorId: str
    text: str
    createdAt: Optional[datetime] = None

class Post(Document):
    """
    Đại diện cho một bài đăng trong collection 'posts'.
    """
    id: str = Field(default_factory=new_id, description="ID của bài đăng.")
    authorId: str = Field(..., description="ID của tác giả bài đăng.")
    content: str = Field(..., description="Nội dung văn bản của bài đăng.")
    likes: List[str] = Field(default_factory=list, description="ID những người đã thích, không trùng lặp.")
    comments: List[Comment] = Field(default_factory=list, description="Bình luận theo thứ tự thêm vào, chỉ nối thêm.")
    createdAt: datetime = Field(default_factory=datetime.utcnow, description="Thời điểm bài đăng được tạo.")

    class Settings:
        name = "posts"
        indexes = [
            "authorId",
            "likes",
        ]
