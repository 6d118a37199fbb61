from bson import ObjectId


def new_id() -> str:
    """Sinh ID dạng chuỗi (hex của ObjectId) cho bản ghi chưa có ID."""
    return str(ObjectId())
