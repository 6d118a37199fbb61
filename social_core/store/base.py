from abc import ABC, abstractmethod
from typing import Any, List, Optional
from beanie import Document


class DocumentStore(ABC):
    """
    Hợp đồng kho tài liệu mà các manager sử dụng.

    Mỗi lệnh ghi chỉ nguyên tử trên một bản ghi; không có giao dịch
    nhiều bản ghi. Lỗi I/O được báo bằng `StoreError`.
    """

    @abstractmethod
    async def load(self, collection: str, record_id: str) -> Optional[Document]:
        """Trả về bản ghi theo ID, hoặc None nếu không tồn tại."""

    @abstractmethod
    async def save(self, record: Document) -> Document:
        """Upsert theo ID (ID được sinh nếu chưa có) và trả về bản ghi đã lưu."""

    @abstractmethod
    async def query_by_field(self, collection: str, **criteria: Any) -> List[Document]:
        """So khớp chính xác trên mọi trường được truyền; không đảm bảo thứ tự."""

    @abstractmethod
    async def add_to_set(self, collection: str, record_id: str, field: str, value: Any) -> Optional[Document]:
        """Hợp tập hợp phía máy chủ: thêm `value` vào `field` nếu chưa có."""

    @abstractmethod
    async def append(self, collection: str, record_id: str, field: str, value: Any) -> Optional[Document]:
        """Nối `value` vào cuối danh sách `field` một cách nguyên tử."""

    @abstractmethod
    async def set_field(self, collection: str, record_id: str, field: str, value: Any,
                        guard: Optional[dict] = None) -> Optional[Document]:
        """
        Gán một trường duy nhất. Nếu có `guard`, chỉ ghi khi bản ghi khớp điều
        kiện đó; trả về None khi không có bản ghi nào khớp.
        """
