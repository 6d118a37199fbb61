from fastapi import APIRouter, Depends
from typing import List
from ..dependencies import get_conversation_manager
from ..models import Message
from ..schemas import MessageCreate, MessagePublic
from ..services import ConversationManager
from ..utils import map_message_to_public_dict

router = APIRouter(tags=["Chat"])

@router.post("", response_model=MessagePublic, status_code=201)
async def send_message(
    message_data: MessageCreate,
    manager: ConversationManager = Depends(get_conversation_manager)
):
    """Gửi tin nhắn. Thời điểm gửi do máy chủ gán."""
    message = Message(
        senderId=message_data.senderId,
        receiverId=message_data.receiverId,
        content=message_data.content,
        timestamp=message_data.timestamp,
    )
    saved = await manager.send_message(message)
    return map_message_to_public_dict(saved)

@router.post("/{message_id}/read")
async def mark_message_as_read(
    message_id: str,
    manager: ConversationManager = Depends(get_conversation_manager)
):
    await manager.mark_as_read(message_id)
    return {"message": "Đã đánh dấu tin nhắn là đã đọc."}

# Chỉ một chiều: sender -> receiver
@router.get("/sent/{sender_id}/to/{receiver_id}", response_model=List[MessagePublic])
async def get_messages_by_sender_and_receiver(
    sender_id: str,
    receiver_id: str,
    manager: ConversationManager = Depends(get_conversation_manager)
):
    messages = await manager.messages_between(sender_id, receiver_id)
    return [map_message_to_public_dict(m) for m in messages]

@router.get("/conversation/{user_a}/{user_b}", response_model=List[MessagePublic])
async def get_conversation(
    user_a: str,
    user_b: str,
    manager: ConversationManager = Depends(get_conversation_manager)
):
    """Cả hai chiều, sắp xếp theo thời gian gửi."""
    messages = await manager.conversation_between(user_a, user_b)
    return [map_message_to_public_dict(m) for m in messages]

@router.get("/unread/{receiver_id}", response_model=List[MessagePublic])
async def get_unread_messages(
    receiver_id: str,
    manager: ConversationManager = Depends(get_conversation_manager)
):
    messages = await manager.unread_for(receiver_id)
    return [map_message_to_public_dict(m) for m in messages]
