"""
Tests for the Redis income repository, against a mocked asyncio client.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import WatchError

from income_api.entities import IncomePatchEntity, IncomeRecordEntity
from income_api.exceptions import IncomeNotFoundError
from income_api.protocols import IncomeStore
from income_api.repositories import RedisIncomeRepository


@pytest.fixture
def pipe():
    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[])
    pipe.watch = AsyncMock()
    pipe.exists = AsyncMock(return_value=1)
    pipe.reset = AsyncMock()
    return pipe


@pytest.fixture
def redis_client(pipe):
    client = MagicMock()
    client.pipeline.return_value = pipe
    client.zrangebyscore = AsyncMock(return_value=[])
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def repository(redis_client):
    return RedisIncomeRepository(redis_client=redis_client, key_prefix="test_income")


def test_satisfies_protocol(repository):
    assert isinstance(repository, IncomeStore)


def test_get_income(repository, redis_client, pipe):
    redis_client.zrangebyscore.return_value = ["a1", "b2"]
    pipe.execute.return_value = [
        {"description": "Salary", "timestamp": "1200", "category": "salary", "amount": "3200.0"},
        {"description": "", "timestamp": "1500", "category": "gift", "amount": "50"},
    ]

    records = asyncio.run(repository.get_income(1000, 2000))

    redis_client.zrangebyscore.assert_awaited_once_with("test_income:by_timestamp", 1000, 2000)
    pipe.hgetall.assert_any_call("test_income:a1")
    pipe.hgetall.assert_any_call("test_income:b2")
    assert records == [
        IncomeRecordEntity(id="a1", description="Salary", timestamp=1200, category="salary", amount=3200.0),
        IncomeRecordEntity(id="b2", description="", timestamp=1500, category="gift", amount=50.0),
    ]


def test_get_income_empty_range(repository, redis_client, pipe):
    assert asyncio.run(repository.get_income(2000, 1000)) == []
    pipe.execute.assert_not_awaited()


def test_get_income_skips_dangling_index_entries(repository, redis_client, pipe):
    redis_client.zrangebyscore.return_value = ["gone", "a1"]
    pipe.execute.return_value = [
        {},
        {"description": "x", "timestamp": "1", "category": "c", "amount": "1"},
    ]

    records = asyncio.run(repository.get_income(0, 10))
    assert [r.id for r in records] == ["a1"]


def test_add_income(repository, pipe):
    record = IncomeRecordEntity(id="a1", description="Salary", timestamp=1200, category="salary", amount=10.5)

    assert asyncio.run(repository.add_income(record)) == "a1"
    pipe.hset.assert_called_once_with(
        "test_income:a1",
        mapping={"description": "Salary", "timestamp": "1200", "category": "salary", "amount": "10.5"},
    )
    pipe.zadd.assert_called_once_with("test_income:by_timestamp", {"a1": 1200})
    pipe.execute.assert_awaited_once()


def test_remove_income(repository, pipe):
    asyncio.run(repository.remove_income("a1"))

    pipe.delete.assert_called_once_with("test_income:a1")
    pipe.zrem.assert_called_once_with("test_income:by_timestamp", "a1")
    pipe.execute.assert_awaited_once()


def test_edit_income(repository, pipe):
    patch = IncomePatchEntity(description="Bonus", timestamp=1300, category="salary")

    asyncio.run(repository.edit_income("a1", patch))

    pipe.watch.assert_awaited_once_with("test_income:a1")
    pipe.exists.assert_awaited_once_with("test_income:a1")
    pipe.multi.assert_called_once()
    pipe.hset.assert_called_once_with(
        "test_income:a1",
        mapping={"description": "Bonus", "timestamp": "1300", "category": "salary"},
    )
    pipe.zadd.assert_called_once_with("test_income:by_timestamp", {"a1": 1300})
    pipe.execute.assert_awaited_once()
    pipe.reset.assert_awaited_once()


def test_edit_income_unknown_id(repository, pipe):
    pipe.exists.return_value = 0
    patch = IncomePatchEntity(description="Bonus", timestamp=1300, category="salary")

    with pytest.raises(IncomeNotFoundError):
        asyncio.run(repository.edit_income("missing", patch))
    pipe.multi.assert_not_called()
    pipe.execute.assert_not_awaited()
    pipe.reset.assert_awaited_once()


def test_edit_income_record_removed_after_check(repository, pipe):
    """A delete landing between the check and the write aborts the write."""
    pipe.exists.side_effect = [1, 0]
    pipe.execute.side_effect = WatchError("watched key changed")
    patch = IncomePatchEntity(description="Bonus", timestamp=1300, category="salary")

    with pytest.raises(IncomeNotFoundError):
        asyncio.run(repository.edit_income("a1", patch))
    assert pipe.watch.await_count == 2
    pipe.execute.assert_awaited_once()
    pipe.reset.assert_awaited_once()


def test_edit_income_retries_after_concurrent_change(repository, pipe):
    pipe.exists.side_effect = [1, 1]
    pipe.execute.side_effect = [WatchError("watched key changed"), [0, 0]]
    patch = IncomePatchEntity(description="Bonus", timestamp=1300, category="salary")

    asyncio.run(repository.edit_income("a1", patch))

    assert pipe.watch.await_count == 2
    assert pipe.execute.await_count == 2


def test_health_check(repository, redis_client):
    assert asyncio.run(repository.health_check()) is True

    redis_client.ping.side_effect = ConnectionError("refused")
    assert asyncio.run(repository.health_check()) is False


def test_close(repository, redis_client):
    asyncio.run(repository.close())
    redis_client.aclose.assert_awaited_once()
