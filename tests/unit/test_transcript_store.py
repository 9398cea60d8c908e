"""
Tests for the transcript store that need no database.
"""

from datetime import datetime
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from core import DatabaseException
from memory.transcript_store import AsyncTranscriptStore, _to_row
from schemas import TranscriptEntryCreateSchema


@pytest.fixture
def store():
    return AsyncTranscriptStore("postgresql://user:pw@localhost:5432/test")


def entry(payload="hi", order=None):
    return TranscriptEntryCreateSchema(payload=payload, user_id="42", sender_id="42", type="text", order=order)


class TestAsyncTranscriptStore:
    def test_url_uses_asyncpg(self, store):
        assert store.engine.url.drivername == "postgresql+asyncpg"

    def test_row_keeps_order_and_shared_timestamp(self):
        created_at = datetime(2026, 1, 1)

        row = _to_row(entry(order=2), created_at)

        assert row.order == 2
        assert row.created_at == created_at
        assert row.user_id == "42"
        assert row.type == "text"

    async def test_empty_batch_skips_database(self, store):
        with patch.object(store, "_insert", new=AsyncMock()) as insert:
            assert await store.append_batch([]) == []

        insert.assert_not_called()

    async def test_append_failure_becomes_database_exception(self, store):
        error = OperationalError("INSERT", {}, Exception("connection refused"))
        with patch.object(store, "_insert", new=AsyncMock(side_effect=error)):
            with pytest.raises(DatabaseException) as exc_info:
                await store.append(entry())

        assert exc_info.value.__cause__ is error

    async def test_batch_is_inserted_in_one_call(self, store):
        entries = [entry("a", 0), entry("b", 1)]
        with patch.object(store, "_insert", new=AsyncMock(return_value=[])) as insert:
            await store.append_batch(entries)

        insert.assert_awaited_once_with(entries)
