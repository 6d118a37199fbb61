from pydantic import BaseModel
from datetime import datetime

class FriendRequestCreate(BaseModel):
    senderId: str
    receiverId: str

class FriendRequestPublic(BaseModel):
    id: str
    senderId: str
    receiverId: str
    status: str
    createdAt: datetime

    class Config:
        from_attributes = True
