from .user import User
from .friend_request import FriendRequest, FriendRequestStatus
from .post import Post, Comment
from .message import Message
from .database import init_db, DOCUMENT_MODELS
