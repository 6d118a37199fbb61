from ..schemas import CommentPublic, FriendRequestPublic, MessagePublic, PostPublic
from ..models import FriendRequest, Message, Post

# Các hàm trợ giúp để chuyển đổi các đối tượng mô hình thành từ điển trả về cho client
def map_friend_request_to_public_dict(request: FriendRequest) -> dict:
    return FriendRequestPublic(
        id=str(request.id),
        senderId=request.senderId,
        receiverId=request.receiverId,
        status=request.status,
        createdAt=request.createdAt,
    ).model_dump()

def map_post_to_public_dict(post: Post) -> dict:
    """Chuyển đổi một mô hình Post (kèm bình luận nhúng) thành từ điển."""
    public_post = PostPublic(
        id=str(post.id),
        authorId=post.authorId,
        content=post.content,
        likes=list(post.likes),
        likeCount=len(post.likes),
        comments=[CommentPublic(**comment.model_dump()) for comment in post.comments],
        createdAt=post.createdAt,
    )
    return public_post.model_dump()

def map_message_to_public_dict(msg: Message) -> dict:
    """Chuyển đổi một mô hình Message thành một từ điển có thể tuần tự hóa JSON."""
    public_msg = MessagePublic(
        id=str(msg.id),
        senderId=msg.senderId,
        receiverId=msg.receiverId,
        content=msg.content,
        timestamp=msg.timestamp,
        isRead=msg.isRead,
    )
    return public_msg.model_dump()
