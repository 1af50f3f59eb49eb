"""
Read access to the orders collection
"""

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from bazzarnet.core.errors import ErrorResponse
from bazzarnet.core.logger import logger
from bazzarnet.models.order import OrderStatus
from bazzarnet.utils.validators import as_reference, to_object_id


class OrderRepository:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def has_delivered_purchase(self, user_id: str, product_id: str) -> bool:
        """True when the user has a Delivered order with the product among its items"""
        product_object_id = to_object_id(product_id)
        if product_object_id is None:
            return False

        try:
            order = await self.collection.find_one(
                {
                    "user": as_reference(user_id),
                    "items.product": product_object_id,
                    "order_status": OrderStatus.DELIVERED.value,
                },
                {"_id": 1},
            )
            return order is not None
        except PyMongoError as e:
            logger.error(f"MongoDB error verifying purchase: {e}")
            raise ErrorResponse("Database error during purchase verification", status_code=503)
