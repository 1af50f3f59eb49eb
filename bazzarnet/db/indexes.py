"""
Database index management for MongoDB.

Indexes are created at application startup. The unique (user, product)
index on reviews is what ultimately guarantees one review per purchaser;
the existence check in the review service only fails fast.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from bazzarnet.core.logger import logger
from bazzarnet.db.mongodb import PRODUCTS, REVIEWS, STORES, ORDERS


async def create_indexes(database: AsyncIOMotorDatabase) -> None:
    """
    Create all catalog indexes. Existing indexes with the same spec are left alone.

    Args:
        database: MongoDB database instance
    """
    products = database[PRODUCTS]
    reviews = database[REVIEWS]
    stores = database[STORES]
    orders = database[ORDERS]

    try:
        await products.create_index([("name", ASCENDING)], name="idx_name")
        await products.create_index([("category", ASCENDING)], name="idx_category")
        await products.create_index([("store", ASCENDING)], name="idx_store")
        await products.create_index([("is_active", ASCENDING)], name="idx_is_active")
        logger.info("Created product indexes on 'name', 'category', 'store', 'is_active'")

        await reviews.create_index(
            [("user", ASCENDING), ("product", ASCENDING)],
            unique=True,
            name="idx_user_product_unique"
        )
        await reviews.create_index(
            [("product", ASCENDING), ("created_at", DESCENDING)],
            name="idx_product_created"
        )
        logger.info("Created review indexes (unique user+product, product+created_at)")

        await stores.create_index(
            [("address.pin_code", ASCENDING), ("is_active", ASCENDING)],
            name="idx_pincode_active"
        )
        logger.info("Created store index on 'address.pin_code', 'is_active'")

        await orders.create_index(
            [("user", ASCENDING), ("items.product", ASCENDING), ("order_status", ASCENDING)],
            name="idx_user_product_status"
        )
        logger.info("Created order index for purchase verification")
    except PyMongoError as e:
        logger.error(
            "Failed to create indexes",
            error=e,
            metadata={"event": "index_creation_failed"}
        )
        raise
