"""
MongoStore lifecycle tests with the Motor client patched out.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from pymongo.errors import ServerSelectionTimeoutError

from app.core.config import Settings
from app.core.exceptions import DatabaseUnavailableError
from app.db.indexes import INDEXES, create_indexes
from app.db.mongo import MongoStore
from tests.factories import make_store


def fake_client(ping_side_effect=None):
    client = MagicMock(name="motor_client")
    client.admin.command = AsyncMock(side_effect=ping_side_effect)
    return client


def test_collections_require_connection():
    store = MongoStore(Settings())
    assert store.is_connected is False
    with pytest.raises(DatabaseUnavailableError):
        store.users


@pytest.mark.asyncio
async def test_connect_selects_database():
    client = fake_client()
    store = MongoStore(Settings(MONGODB_DB_NAME="tournext_test"))

    with patch("app.db.mongo.AsyncIOMotorClient", return_value=client) as motor:
        await store.connect()

    motor.assert_called_once()
    client.admin.command.assert_awaited_once_with("ping")
    client.__getitem__.assert_called_once_with("tournext_test")
    assert store.is_connected
    assert await store.ping() is True


@pytest.mark.asyncio
async def test_connect_retries_then_fails():
    client = fake_client(ping_side_effect=ServerSelectionTimeoutError("no servers"))
    store = MongoStore(Settings(MONGODB_CONNECT_RETRIES=2, MONGODB_RETRY_DELAY=0))

    with patch("app.db.mongo.AsyncIOMotorClient", return_value=client), \
         patch("app.db.mongo.asyncio.sleep", new=AsyncMock()) as sleep:
        with pytest.raises(DatabaseUnavailableError):
            await store.connect()

    assert client.admin.command.await_count == 2
    sleep.assert_awaited_once()
    assert store.is_connected is False


@pytest.mark.asyncio
async def test_close_is_idempotent():
    client = fake_client()
    store = MongoStore(Settings())

    with patch("app.db.mongo.AsyncIOMotorClient", return_value=client):
        await store.connect()

    await store.close()
    await store.close()

    client.close.assert_called_once()
    assert await store.ping() is False


@pytest.mark.asyncio
async def test_create_indexes_covers_every_collection():
    store = make_store()

    await create_indexes(store)

    for name, indexes in INDEXES.items():
        assert store.collection(name).create_index.await_count == len(indexes)
