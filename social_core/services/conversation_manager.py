import logging
from datetime import datetime
from typing import List
from ..exceptions import NotFoundError
from ..models import Message
from ..store import DocumentStore

logger = logging.getLogger(__name__)

MESSAGES = Message.Settings.name


class ConversationManager:
    """
    Gửi tin nhắn trực tiếp và theo dõi trạng thái đã đọc.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def send_message(self, message: Message) -> Message:
        """
        Lưu tin nhắn mới. Thời điểm gửi luôn do máy chủ gán, bỏ qua giá trị client gửi lên.
        """
        message.timestamp = datetime.utcnow()
        message.isRead = False
        saved = await self.store.save(message)
        logger.info(f"Message {saved.id} sent: {saved.senderId} -> {saved.receiverId}")
        return saved

    async def mark_as_read(self, message_id: str) -> None:
        message = await self.store.load(MESSAGES, message_id)
        if not message:
            raise NotFoundError("Không tìm thấy tin nhắn.")

        # isRead chỉ chuyển false -> true
        if message.isRead:
            return
        message.isRead = True
        await self.store.save(message)

    async def messages_between(self, sender_id: str, receiver_id: str) -> List[Message]:
        """
        Chỉ lấy tin nhắn theo đúng chiều sender -> receiver.
        """
        return await self.store.query_by_field(MESSAGES, senderId=sender_id, receiverId=receiver_id)

    async def conversation_between(self, user_a: str, user_b: str) -> List[Message]:
        """
        Gộp tin nhắn cả hai chiều giữa hai người dùng, sắp xếp theo thời gian gửi.
        """
        outgoing = await self.messages_between(user_a, user_b)
        # Tin nhắn gửi cho chính mình: hai chiều là cùng một truy vấn
        incoming = [] if user_a == user_b else await self.messages_between(user_b, user_a)
        return sorted(outgoing + incoming, key=lambda m: m.timestamp or datetime.min)

    async def unread_for(self, receiver_id: str) -> List[Message]:
        return await self.store.query_by_field(MESSAGES, receiverId=receiver_id, isRead=False)
