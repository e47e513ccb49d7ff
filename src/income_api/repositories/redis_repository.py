"""Redis implementation of IncomeStore.

Layout:
    <prefix>:<id>            hash with description, timestamp, category, amount
    <prefix>:by_timestamp    sorted set of ids scored by timestamp
"""

import logging

from redis import asyncio as aioredis
from redis.exceptions import WatchError

from income_api.config import get_redis_client, settings
from income_api.entities import IncomePatchEntity, IncomeRecordEntity
from income_api.exceptions import IncomeNotFoundError

logger = logging.getLogger(__name__)


class RedisIncomeRepository:
    """Income store backed by Redis hashes and a sorted-set time index.

    This class satisfies the IncomeStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: aioredis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis income repository.

        Args:
            redis_client: asyncio Redis client. If None, creates default.
            key_prefix: Prefix for every key this repository touches.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.income_key_prefix

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisIncomeRepository":
        """Factory method to create RedisIncomeRepository from settings.

        Args:
            key_prefix: Key prefix. If None, uses settings.

        Returns:
            Configured RedisIncomeRepository
        """
        return cls(key_prefix=key_prefix)

    def _record_key(self, income_id: str) -> str:
        return f"{self._prefix}:{income_id}"

    @property
    def index_key(self) -> str:
        """Key of the sorted set indexing ids by timestamp."""
        return f"{self._prefix}:by_timestamp"

    async def get_income(self, start: int, end: int) -> list[IncomeRecordEntity]:
        """Return records with start <= timestamp <= end, oldest first.

        Args:
            start: Range start in Unix seconds
            end: Range end in Unix seconds

        Returns:
            Matching records, empty when start > end
        """
        ids = await self._client.zrangebyscore(self.index_key, start, end)
        if not ids:
            return []

        pipe = self._client.pipeline(transaction=False)
        for income_id in ids:
            pipe.hgetall(self._record_key(income_id))
        rows = await pipe.execute()

        records = []
        for income_id, row in zip(ids, rows):
            # Index entries can outlive a hash deleted outside this repository
            if not row:
                logger.warning("Income %s is indexed but has no record", income_id)
                continue
            records.append(self._to_entity(income_id, row))
        return records

    async def add_income(self, record: IncomeRecordEntity) -> str:
        """Insert a record.

        Args:
            record: The record to store

        Returns:
            The record id
        """
        pipe = self._client.pipeline(transaction=True)
        pipe.hset(
            self._record_key(record.id),
            mapping={
                "description": record.description,
                "timestamp": str(record.timestamp),
                "category": record.category,
                "amount": str(record.amount),
            },
        )
        pipe.zadd(self.index_key, {record.id: record.timestamp})
        await pipe.execute()
        return record.id

    async def remove_income(self, income_id: str) -> None:
        """Delete a record. Unknown ids are ignored.

        Args:
            income_id: The record to delete
        """
        pipe = self._client.pipeline(transaction=True)
        pipe.delete(self._record_key(income_id))
        pipe.zrem(self.index_key, income_id)
        await pipe.execute()

    async def edit_income(self, income_id: str, patch: IncomePatchEntity) -> None:
        """Overwrite description, timestamp and category of a record.

        The record key is WATCHed so a concurrent delete aborts the write
        instead of recreating a partial record; the check is then retried.

        Args:
            income_id: The record to edit
            patch: New field values

        Raises:
            IncomeNotFoundError: If no record has this id
        """
        key = self._record_key(income_id)
        pipe = self._client.pipeline(transaction=True)
        try:
            while True:
                try:
                    await pipe.watch(key)
                    if not await pipe.exists(key):
                        raise IncomeNotFoundError(f"Income {income_id} not found")

                    pipe.multi()
                    pipe.hset(
                        key,
                        mapping={
                            "description": patch.description,
                            "timestamp": str(patch.timestamp),
                            "category": patch.category,
                        },
                    )
                    pipe.zadd(self.index_key, {income_id: patch.timestamp})
                    await pipe.execute()
                    return
                except WatchError:
                    logger.debug("Income %s changed during edit, retrying", income_id)
        finally:
            await pipe.reset()

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except Exception:
            logger.warning("Redis ping failed", exc_info=True)
            return False

    async def close(self) -> None:
        """Release the Redis connection pool."""
        await self._client.aclose()

    @staticmethod
    def _to_entity(income_id: str, row: dict[str, str]) -> IncomeRecordEntity:
        return IncomeRecordEntity(
            id=income_id,
            description=row.get("description", ""),
            timestamp=int(row.get("timestamp", 0)),
            category=row.get("category", ""),
            amount=float(row.get("amount", 0.0)),
        )

    @property
    def client(self) -> aioredis.Redis:
        """Get the Redis client."""
        return self._client
