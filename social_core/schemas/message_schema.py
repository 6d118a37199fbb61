from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class MessageCreate(BaseModel):
    senderId: str
    receiverId: str
    content: str
    timestamp: Optional[datetime] = None  # Bị máy chủ ghi đè khi lưu

class MessagePublic(BaseModel):
    id: str
    senderId: str
    receiverId: str
    content: str
    timestamp: datetime
    isRead: bool

    class Config:
        from_attributes = True
