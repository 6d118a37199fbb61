import logging
from datetime import datetime
from typing import List, Optional
from ..exceptions import DuplicateRequestError, InvalidOperationError, NotFoundError, StoreError
from ..models import FriendRequest, FriendRequestStatus, User
from ..store import DocumentStore

logger = logging.getLogger(__name__)

USERS = User.Settings.name
FRIEND_REQUESTS = FriendRequest.Settings.name


class RelationshipManager:
    """
    Vòng đời yêu cầu kết bạn và duy trì danh sách bạn bè hai chiều.

    Chấp nhận kết bạn gồm hai lệnh ghi độc lập (mỗi lệnh là một phép hợp
    tập hợp phía máy chủ). Nếu lệnh thứ hai lỗi, đồ thị bị lệch một chiều
    cho tới khi `reconcile_friendships` được gọi.
    """

    def __init__(self, store: DocumentStore, reject_duplicates: bool = False):
        self.store = store
        self.reject_duplicates = reject_duplicates

    async def send_friend_request(self, sender_id: str, receiver_id: str) -> FriendRequest:
        """
        Gửi một yêu cầu kết bạn (trạng thái PENDING).
        """
        if sender_id == receiver_id:
            raise InvalidOperationError("Không thể gửi yêu cầu kết bạn cho chính mình.")

        if self.reject_duplicates:
            existing = await self.store.query_by_field(
                FRIEND_REQUESTS, senderId=sender_id, receiverId=receiver_id, status="PENDING"
            )
            if existing:
                raise DuplicateRequestError("Một yêu cầu kết bạn đang chờ xử lý đã tồn tại.")

        new_request = FriendRequest(
            senderId=sender_id,
            receiverId=receiver_id,
            status="PENDING",
            createdAt=datetime.utcnow(),
        )
        saved = await self.store.save(new_request)
        logger.info(f"Friend request {saved.id} sent: {sender_id} -> {receiver_id}")
        return saved

    async def reject_friend_request(self, request_id: str) -> None:
        """
        Từ chối yêu cầu kết bạn. Trạng thái trước đó không được kiểm tra.
        """
        friend_request = await self.store.load(FRIEND_REQUESTS, request_id)
        if not friend_request:
            raise NotFoundError("Không tìm thấy yêu cầu kết bạn.")

        if friend_request.status != "PENDING":
            logger.warning(f"Rejecting friend request {request_id} with status {friend_request.status}")

        friend_request.status = "REJECTED"
        await self.store.save(friend_request)
        logger.info(f"Friend request {request_id} rejected")

    async def accept_friend_request(self, user_id: str, friend_id: str, request_id: Optional[str] = None) -> None:
        """
        Thêm hai người dùng vào danh sách bạn bè của nhau.

        Args:
            user_id: ID người chấp nhận
            friend_id: ID người được thêm làm bạn
            request_id: (tùy chọn) yêu cầu gốc; nếu có sẽ được chuyển sang ACCEPTED
        """
        if user_id == friend_id:
            raise InvalidOperationError("Không thể kết bạn với chính mình.")

        user = await self.store.load(USERS, user_id)
        if not user:
            raise NotFoundError(f"Không tìm thấy người dùng {user_id}.")
        friend = await self.store.load(USERS, friend_id)
        if not friend:
            raise NotFoundError(f"Không tìm thấy người dùng {friend_id}.")

        friend_request = None
        if request_id is not None:
            friend_request = await self._load_request_for_pair(request_id, user_id, friend_id)

        if await self.store.add_to_set(USERS, user_id, "friends", friend_id) is None:
            raise NotFoundError(f"Không tìm thấy người dùng {user_id}.")
        try:
            updated_friend = await self.store.add_to_set(USERS, friend_id, "friends", user_id)
        except StoreError:
            logger.error(f"Partial accept: {friend_id} added to {user_id} but not the reverse")
            raise
        if updated_friend is None:
            logger.error(f"Partial accept: user {friend_id} disappeared before the second write")
            raise NotFoundError(f"Không tìm thấy người dùng {friend_id}.")

        if friend_request is not None and friend_request.status != "ACCEPTED":
            # Chỉ ghi trạng thái, không ghi đè một lần từ chối xảy ra trong lúc này
            accepted = await self.store.set_field(
                FRIEND_REQUESTS, request_id, "status", "ACCEPTED", guard={"status": {"$ne": "REJECTED"}}
            )
            if accepted is None:
                logger.warning(f"Friend request {request_id} was rejected concurrently; status left as REJECTED")

        logger.info(f"Friendship created: {user_id} <-> {friend_id}")

    async def _load_request_for_pair(self, request_id: str, user_id: str, friend_id: str) -> FriendRequest:
        friend_request = await self.store.load(FRIEND_REQUESTS, request_id)
        if not friend_request:
            raise NotFoundError("Không tìm thấy yêu cầu kết bạn.")
        if friend_request.receiverId != user_id or friend_request.senderId != friend_id:
            raise InvalidOperationError("Yêu cầu kết bạn không thuộc về cặp người dùng này.")
        if friend_request.status == "REJECTED":
            raise InvalidOperationError("Yêu cầu kết bạn này đã bị từ chối.")
        return friend_request

    async def sent_by(self, sender_id: str) -> List[FriendRequest]:
        return await self.store.query_by_field(FRIEND_REQUESTS, senderId=sender_id)

    async def received_by(self, receiver_id: str, status: Optional[FriendRequestStatus] = None) -> List[FriendRequest]:
        """
        Lấy các yêu cầu kết bạn gửi tới `receiver_id`, lọc theo trạng thái nếu có.
        """
        if status is None:
            return await self.store.query_by_field(FRIEND_REQUESTS, receiverId=receiver_id)
        return await self.store.query_by_field(FRIEND_REQUESTS, receiverId=receiver_id, status=status)

    async def friends_of(self, user_id: str) -> List[str]:
        user = await self.store.load(USERS, user_id)
        if not user:
            raise NotFoundError("Không tìm thấy người dùng.")
        return list(user.friends)

    async def reconcile_friendships(self, user_id: str) -> List[str]:
        """
        Sửa các cạnh một chiều xuất phát từ `user_id`: với mỗi f trong
        friends(user), đảm bảo user nằm trong friends(f). Trả về các ID đã sửa.
        """
        user = await self.store.load(USERS, user_id)
        if not user:
            raise NotFoundError("Không tìm thấy người dùng.")

        repaired = []
        for friend_id in user.friends:
            friend = await self.store.load(USERS, friend_id)
            if friend is None:
                logger.warning(f"Reconcile {user_id}: friend {friend_id} no longer exists")
                continue
            if user_id not in friend.friends:
                if await self.store.add_to_set(USERS, friend_id, "friends", user_id) is None:
                    logger.warning(f"Reconcile {user_id}: friend {friend_id} no longer exists")
                    continue
                repaired.append(friend_id)

        if repaired:
            logger.warning(f"Reconcile {user_id}: repaired asymmetric edges to {repaired}")
        return repaired
