from beanie import Document
from pydantic import Field, model_validator
from typing import Literal
from datetime import datetime
from .ids import new_id

FriendRequestStatus = Literal['PENDING', 'ACCEPTED', 'REJECTED']

class FriendRequest(Document):
    """
    Đại diện cho một yêu cầu kết bạn.
    """
    id: str = Field(default_factory=new_id, description="ID của yêu cầu.")
    senderId: str = Field(..., description="ID của người gửi yêu cầu.")
    receiverId: str = Field(..., description="ID của người nhận yêu cầu.")
    status: FriendRequestStatus = Field(default='PENDING', description="Trạng thái của yêu cầu.")
    createdAt: datetime = Field(default_factory=datetime.utcnow, description="Thời điểm yêu cầu được tạo.")

    @model_validator(mode="after")
    def sender_is_not_receiver(self):
        if self.senderId == self.receiverId:
            raise ValueError("Người gửi và người nhận không được trùng nhau.")
        return self

    class Settings:
        name = "friendRequests"
        indexes = [
            "senderId",
            "receiverId",
            "status",
        ]
