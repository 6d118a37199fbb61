from pydantic import BaseModel
from typing import List, Optional

class FriendAccept(BaseModel):
    friendId: str
    requestId: Optional[str] = None # Nếu có, yêu cầu gốc được chuyển sang ACCEPTED

class FriendListPublic(BaseModel):
    userId: str
    friends: List[str]

class ReconcileResult(BaseModel):
    userId: str
    repaired: List[str]
