#!/usr/bin/env python3
"""
Remove every document the catalog service owns or reads.

Usage: python database/scripts/clear.py [--drop]
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from dotenv import load_dotenv

load_dotenv()

from motor.motor_asyncio import AsyncIOMotorClient

from bazzarnet.core.config import config
from seed import SEEDED_COLLECTIONS


async def clear(drop: bool = False):
    client = AsyncIOMotorClient(config.mongodb_url)
    db = client[config.mongodb_database]
    try:
        await db.command('ping')
        for name in SEEDED_COLLECTIONS:
            if drop:
                await db.drop_collection(name)
                print(f"Dropped '{name}'")
            else:
                result = await db[name].delete_many({})
                print(f"Deleted {result.deleted_count} documents from '{name}'")
    finally:
        client.close()


if __name__ == "__main__":
    asyncio.run(clear(drop="--drop" in sys.argv))
