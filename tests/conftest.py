from datetime import datetime, timedelta

import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

from social_core.exceptions import StoreUnavailableError
from social_core.models import User, init_db
from social_core.store import BeanieDocumentStore


@pytest_asyncio.fixture
async def store():
    client = AsyncMongoMockClient()
    await init_db(database=client["social_core_test"])
    return BeanieDocumentStore()


async def make_user(store, user_id, friends=None):
    user = User(
        id=user_id,
        email=f"{user_id}@example.com",
        passwordHash="hashed",
        friends=list(friends or []),
    )
    return await store.save(user)


def assert_recent(value: datetime, started: datetime):
    # Mongo lưu datetime với độ chính xác mili giây
    assert started - timedelta(seconds=1) <= value <= datetime.utcnow() + timedelta(seconds=1)


class FlakyStore(BeanieDocumentStore):
    """Store thật, nhưng lệnh add_to_set thứ `fail_on` ném lỗi không khả dụng."""

    def __init__(self, fail_on: int):
        super().__init__()
        self.fail_on = fail_on
        self.add_to_set_calls = 0

    async def add_to_set(self, collection, record_id, field, value):
        self.add_to_set_calls += 1
        if self.add_to_set_calls == self.fail_on:
            raise StoreUnavailableError("Kho dữ liệu không khả dụng (update users).")
        return await super().add_to_set(collection, record_id, field, value)


class InterleavingStore(BeanieDocumentStore):
    """Chạy `before_write` ngay trước lệnh add_to_set thứ `on_call`."""

    def __init__(self, on_call: int, before_write):
        super().__init__()
        self.on_call = on_call
        self.before_write = before_write
        self.add_to_set_calls = 0

    async def add_to_set(self, collection, record_id, field, value):
        self.add_to_set_calls += 1
        if self.add_to_set_calls == self.on_call:
            await self.before_write(record_id)
        return await super().add_to_set(collection, record_id, field, value)
