"""
MongoDB connection management
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorClientSession
from pymongo.errors import PyMongoError

from bazzarnet.core.config import config
from bazzarnet.core.errors import ErrorResponse
from bazzarnet.core.logger import logger

PRODUCTS = "products"
REVIEWS = "reviews"
STORES = "stores"
ORDERS = "orders"
USERS = "users"


class Database:
    """Database connection manager"""

    client: Optional[AsyncIOMotorClient] = None
    database = None


db = Database()


async def connect_to_mongo():
    """Create database connection"""
    logger.info("Connecting to MongoDB...")

    try:
        db.client = AsyncIOMotorClient(config.mongodb_url)
        db.database = db.client[config.mongodb_database]

        await db.client.admin.command('ping')

        logger.info(
            f"Successfully connected to MongoDB database '{config.mongodb_database}'",
            metadata={
                "event": "mongodb_connected",
                "database": config.mongodb_database,
                "host": config.mongodb_host,
                "port": config.mongodb_port,
                "transactions": config.mongodb_transactions,
            }
        )
    except PyMongoError as e:
        logger.error(
            f"Could not connect to MongoDB: {e}",
            metadata={"event": "mongodb_connection_error"}
        )
        raise ErrorResponse(f"Could not connect to MongoDB: {e}", status_code=503)


async def close_mongo_connection():
    """Close database connection"""
    logger.info("Closing connection to MongoDB...")
    if db.client is not None:
        db.client.close()
        db.client = None
        db.database = None


async def get_database():
    """Get database instance"""
    if db.database is None:
        await connect_to_mongo()
    return db.database


async def get_collection(name: str):
    database = await get_database()
    return database[name]


@asynccontextmanager
async def transaction() -> AsyncIterator[Optional[AsyncIOMotorClientSession]]:
    """
    Yield a session bound to a multi-document transaction, or None when
    transactions are disabled. Callers pass the yielded value as ``session=``.
    """
    if not config.mongodb_transactions or db.client is None:
        yield None
        return

    async with await db.client.start_session() as session:
        async with session.start_transaction():
            yield session
