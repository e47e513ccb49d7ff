#!/usr/bin/env python3
"""
Seed script for the income store.

Writes a handful of sample income entries into Redis so the
/income endpoints have something to return.
"""

import asyncio
import time
import uuid

from income_api.entities import IncomeRecordEntity
from income_api.repositories import RedisIncomeRepository

DAY = 24 * 60 * 60


def sample_records(now: int) -> list[IncomeRecordEntity]:
    """Build sample records spread over the last month."""
    samples = [
        ("Monthly salary", "salary", 3200.0, 28),
        ("Freelance invoice #42", "freelance", 640.0, 15),
        ("Savings interest", "interest", 12.37, 9),
        ("Birthday gift", "gift", 50.0, 3),
        ("", "other", 20.0, 1),
    ]
    return [
        IncomeRecordEntity(
            id=uuid.uuid4().hex,
            description=description,
            timestamp=now - days_ago * DAY,
            category=category,
            amount=amount,
        )
        for description, category, amount, days_ago in samples
    ]


async def main() -> None:
    repository = RedisIncomeRepository.create()
    now = int(time.time())

    try:
        if not await repository.health_check():
            print("Redis is not reachable, check REDIS_URL")
            return

        print("\nSeeding income entries...")
        for record in sample_records(now):
            await repository.add_income(record)
            print(f"  ✓ {record.id} {record.category:<10} {record.amount:>8.2f}  {record.description!r}")

        print(f"\nTry: curl 'http://localhost:8000/income?start={now - 30 * DAY}&end={now}'")
    finally:
        await repository.close()


if __name__ == "__main__":
    asyncio.run(main())
