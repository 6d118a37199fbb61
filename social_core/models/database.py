# Nhập các thư viện cần thiết
import logging
from motor.motor_asyncio import AsyncIOMotorClient # Thư viện bất đồng bộ cho MongoDB
from beanie import init_beanie # ODM (Object-Document Mapper) cho MongoDB
from typing import Type

from ..configs import get_settings
from .user import User
from .friend_request import FriendRequest
from .post import Post
from .message import Message

logger = logging.getLogger(__name__)

# Danh sách các model Beanie sẽ được khởi tạo
DOCUMENT_MODELS: list[Type] = [User, FriendRequest, Post, Message]

client = None  # client global, dùng 1 lần suốt vòng đời app

async def init_db(database=None):
    """
    Khởi tạo kết nối cơ sở dữ liệu và Beanie ODM.
    Đảm bảo chỉ tạo một client duy nhất. Có thể truyền sẵn `database`
    (ví dụ client giả lập trong test) để bỏ qua MONGO_URI.
    """
    global client

    if database is not None:
        await init_beanie(database=database, document_models=DOCUMENT_MODELS)
        return database

    # Nếu đã có client, bỏ qua
    if client is not None:
        return client

    settings = get_settings()
    if not settings.mongo_uri:
        raise ValueError("Không tìm thấy MONGO_URI trong các biến môi trường.")

    client = AsyncIOMotorClient(settings.mongo_uri)
    database = client.get_database(settings.mongo_db_name)

    await init_beanie(database=database, document_models=DOCUMENT_MODELS)
    logger.info("Đã kết nối MongoDB, database=%s", settings.mongo_db_name)

    return client
