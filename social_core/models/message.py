from beanie import Document
from pydantic import Field
from typing import Optional
from datetime import datetime
from .ids import new_id

class Message(Document):
    """
    Đại diện cho một tin nhắn trực tiếp giữa hai người dùng.
    """
    id: str = Field(default_factory=new_id, description="ID của tin nhắn.")
    senderId: str = Field(..., description="ID của người gửi tin nhắn.")
    receiverId: str = Field(..., description="ID của người nhận tin nhắn.")
    content: str = Field(..., description="Nội dung tin nhắn.")
    timestamp: Optional[datetime] = Field(default=None, description="Thời điểm gửi, do máy chủ gán.")
    isRead: bool = Field(default=False, description="Đã đọc hay chưa, chỉ chuyển false -> true.")

    class Settings:
        name = "messages"
        indexes = [
            [("senderId", 1), ("receiverId", 1)],
            [("receiverId", 1), ("isRead", 1)],
        ]
