from beanie import Document
from pydantic import Field, EmailStr
from typing import List
from .ids import new_id

class User(Document):
    """
    Đại diện cho một người dùng trong collection 'users'.
    """
    id: str = Field(default_factory=new_id, description="ID của người dùng.")
    email: EmailStr = Field(..., description="Địa chỉ email duy nhất của người dùng.")
    passwordHash: str = Field(..., description="Mật khẩu đã được băm (do luồng đăng ký xử lý).")
    friends: List[str] = Field(default_factory=list, description="Danh sách ID bạn bè, ngữ nghĩa tập hợp, đối xứng.")

    class Settings:
        name = "users"
        indexes = [
            "email",
        ]
