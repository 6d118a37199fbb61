from .friend_request_schema import FriendRequestCreate, FriendRequestPublic
from .user_schema import FriendAccept, FriendListPublic, ReconcileResult
from .post_schema import PostCreate, PostPublic, CommentCreate, CommentPublic, LikeCreate
from .message_schema import MessageCreate, MessagePublic
