import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Iterable, List, Optional, Type
from beanie import Document
from pydantic import BaseModel
from pymongo.errors import ConnectionFailure, ExecutionTimeout, PyMongoError

from ..exceptions import StoreInternalError, StoreUnavailableError
from ..models import DOCUMENT_MODELS
from .base import DocumentStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _store_errors(operation: str, collection: str):
    try:
        yield
    except (ConnectionFailure, ExecutionTimeout) as e:
        logger.error(f"Store unavailable during {operation} on '{collection}': {e}")
        raise StoreUnavailableError(f"Kho dữ liệu không khả dụng ({operation} {collection}).") from e
    except PyMongoError as e:
        logger.error(f"Store error during {operation} on '{collection}': {e}")
        raise StoreInternalError(f"Lỗi kho dữ liệu ({operation} {collection}): {e}") from e


class BeanieDocumentStore(DocumentStore):
    """
    Cài đặt `DocumentStore` trên các model Beanie đã được `init_beanie`.
    Tên collection lấy từ `Settings.name` của từng model.
    """

    def __init__(self, document_models: Iterable[Type[Document]] = DOCUMENT_MODELS):
        self._models: Dict[str, Type[Document]] = {
            model.Settings.name: model for model in document_models
        }

    def model_for(self, collection: str) -> Type[Document]:
        try:
            return self._models[collection]
        except KeyError:
            raise ValueError(f"Collection không được hỗ trợ: {collection}") from None

    async def load(self, collection: str, record_id: str) -> Optional[Document]:
        model = self.model_for(collection)
        async with _store_errors("load", collection):
            return await model.get(record_id)

    async def save(self, record: Document) -> Document:
        collection = record.Settings.name
        async with _store_errors("save", collection):
            await record.save()
        return record

    async def query_by_field(self, collection: str, **criteria: Any) -> List[Document]:
        model = self.model_for(collection)
        async with _store_errors("query", collection):
            return await model.find(criteria).to_list()

    async def add_to_set(self, collection: str, record_id: str, field: str, value: Any) -> Optional[Document]:
        return await self._update_one(collection, record_id, {"$addToSet": {field: _encode(value)}})

    async def append(self, collection: str, record_id: str, field: str, value: Any) -> Optional[Document]:
        return await self._update_one(collection, record_id, {"$push": {field: _encode(value)}})

    async def set_field(self, collection: str, record_id: str, field: str, value: Any,
                        guard: Optional[dict] = None) -> Optional[Document]:
        return await self._update_one(collection, record_id, {"$set": {field: _encode(value)}}, guard)

    async def _update_one(self, collection: str, record_id: str, update: dict,
                          guard: Optional[dict] = None) -> Optional[Document]:
        model = self.model_for(collection)
        query = {"_id": record_id, **(guard or {})}
        async with _store_errors("update", collection):
            result = await model.find_one(query).update(update)
            if guard and not result.matched_count:
                return None
            return await model.get(record_id)


def _encode(value: Any) -> Any:
    # Model nhúng (ví dụ Comment) được lưu dưới dạng dict
    if isinstance(value, BaseModel):
        return value.model_dump()
    return value
