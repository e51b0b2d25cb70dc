"""Tests for database connection checks."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from taskboard.database.connection import check_database_connection, create_store
from taskboard.database.mongo import MongoDocumentStore


@pytest.mark.asyncio
async def test_check_succeeds(store):
    assert await check_database_connection(store) == (True, None)


@pytest.mark.asyncio
async def test_check_reports_unreachable_server():
    failing = MagicMock()
    failing.ping = AsyncMock(side_effect=ServerSelectionTimeoutError("timed out"))

    success, message = await check_database_connection(failing)

    assert not success
    assert "Cannot connect to database server" in message


@pytest.mark.asyncio
async def test_check_reports_bad_credentials():
    failing = MagicMock()
    failing.ping = AsyncMock(side_effect=OperationFailure("Authentication failed."))

    success, message = await check_database_connection(failing)

    assert not success
    assert "authentication failed" in message


def test_create_store_uses_named_database():
    client = MagicMock()

    store = create_store(client, "other")

    client.__getitem__.assert_called_once_with("other")
    assert isinstance(store, MongoDocumentStore)
