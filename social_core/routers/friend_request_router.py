from fastapi import APIRouter, Depends
from typing import List, Optional
from ..dependencies import get_relationship_manager
from ..models import FriendRequestStatus
from ..schemas import FriendRequestCreate, FriendRequestPublic
from ..services import RelationshipManager
from ..utils import map_friend_request_to_public_dict

router = APIRouter(tags=["Friend Request"])

# Gửi yêu cầu kết bạn
@router.post("", response_model=FriendRequestPublic, status_code=201)
async def send_friend_request(
    request_data: FriendRequestCreate,
    manager: RelationshipManager = Depends(get_relationship_manager)
):
    """Gửi một yêu cầu kết bạn mới (trạng thái PENDING)."""
    new_request = await manager.send_friend_request(request_data.senderId, request_data.receiverId)
    return map_friend_request_to_public_dict(new_request)

# Từ chối yêu cầu kết bạn
@router.post("/{request_id}/reject")
async def reject_friend_request(
    request_id: str,
    manager: RelationshipManager = Depends(get_relationship_manager)
):
    await manager.reject_friend_request(request_id)
    return {"message": "Đã từ chối yêu cầu kết bạn."}

@router.get("/sent/{sender_id}", response_model=List[FriendRequestPublic])
async def get_sent_friend_requests(
    sender_id: str,
    manager: RelationshipManager = Depends(get_relationship_manager)
):
    requests = await manager.sent_by(sender_id)
    return [map_friend_request_to_public_dict(r) for r in requests]

@router.get("/received/{receiver_id}", response_model=List[FriendRequestPublic])
async def get_received_friend_requests(
    receiver_id: str,
    status: Optional[FriendRequestStatus] = None,
    manager: RelationshipManager = Depends(get_relationship_manager)
):
    """Lấy các yêu cầu kết bạn đã nhận, lọc theo trạng thái (PENDING, ACCEPTED, REJECTED)."""
    requests = await manager.received_by(receiver_id, status)
    return [map_friend_request_to_public_dict(r) for r in requests]
