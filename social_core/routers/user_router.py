from fastapi import APIRouter, Depends
from ..dependencies import get_relationship_manager
from ..schemas import FriendAccept, FriendListPublic, ReconcileResult
from ..services import RelationshipManager

router = APIRouter(tags=["User"])

# Chấp nhận kết bạn: thêm hai người vào danh sách bạn bè của nhau
@router.post("/{user_id}/friends")
async def accept_friend_request(
    user_id: str,
    accept_data: FriendAccept,
    manager: RelationshipManager = Depends(get_relationship_manager)
):
    await manager.accept_friend_request(user_id, accept_data.friendId, request_id=accept_data.requestId)
    return {"message": "Đã chấp nhận lời mời kết bạn."}

@router.get("/{user_id}/friends", response_model=FriendListPublic)
async def get_friends(
    user_id: str,
    manager: RelationshipManager = Depends(get_relationship_manager)
):
    friends = await manager.friends_of(user_id)
    return FriendListPublic(userId=user_id, friends=friends)

@router.post("/{user_id}/friends/reconcile", response_model=ReconcileResult)
async def reconcile_friends(
    user_id: str,
    manager: RelationshipManager = Depends(get_relationship_manager)
):
    """Sửa các quan hệ bạn bè bị lệch một chiều sau một lần chấp nhận lỗi giữa chừng."""
    repaired = await manager.reconcile_friendships(user_id)
    return ReconcileResult(userId=user_id, repaired=repaired)
