class SocialCoreError(Exception):
    """Lỗi gốc của lõi quan hệ & tương tác."""


class NotFoundError(SocialCoreError, ValueError):
    """ID được tham chiếu (yêu cầu kết bạn, bài đăng, tin nhắn, người dùng) không tồn tại."""


class InvalidOperationError(SocialCoreError, ValueError):
    """Thao tác tự tham chiếu hoặc không hợp lệ với dữ liệu hiện có."""


class DuplicateRequestError(InvalidOperationError):
    """Đã có một yêu cầu kết bạn PENDING giữa cùng cặp người dùng."""


class StoreError(SocialCoreError):
    """Lỗi I/O từ kho tài liệu, được trả lên nguyên vẹn (không retry)."""


class StoreUnavailableError(StoreError):
    pass


class StoreInternalError(StoreError):
    pass
