"""
Read access to the stores collection
"""

from typing import Dict, Iterable, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from bazzarnet.core.errors import ErrorResponse
from bazzarnet.core.logger import logger
from bazzarnet.models.product import StoreSummary
from bazzarnet.utils.validators import to_object_id


class StoreRepository:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def find_active_ids_by_pincode(self, pincode: str) -> List[ObjectId]:
        """Ids of the active stores whose address pin code equals pincode"""
        try:
            cursor = self.collection.find(
                {"address.pin_code": pincode, "is_active": True},
                {"_id": 1},
            )
            docs = await cursor.to_list(length=None)
            return [doc["_id"] for doc in docs]
        except PyMongoError as e:
            logger.error(f"MongoDB error resolving pincode: {e}")
            raise ErrorResponse("Database error during store lookup", status_code=503)

    async def get_summaries(self, store_ids: Iterable[str]) -> Dict[str, StoreSummary]:
        """Name and logo of each store, keyed by id string"""
        object_ids = [oid for oid in (to_object_id(sid) for sid in set(store_ids)) if oid is not None]
        if not object_ids:
            return {}

        try:
            cursor = self.collection.find({"_id": {"$in": object_ids}}, {"name": 1, "logo": 1})
            docs = await cursor.to_list(length=len(object_ids))
        except PyMongoError as e:
            logger.error(f"MongoDB error loading stores: {e}")
            raise ErrorResponse("Database error during store lookup", status_code=503)

        return {
            str(doc["_id"]): StoreSummary(id=str(doc["_id"]), name=doc.get("name"), logo=doc.get("logo"))
            for doc in docs
        }

    async def get_stats(self) -> Dict[str, int]:
        try:
            total = await self.collection.count_documents({})
            active = await self.collection.count_documents({"is_active": True})
            return {"total": total, "active": active}
        except PyMongoError as e:
            logger.error(f"MongoDB error getting store stats: {e}")
            raise ErrorResponse("Database error during stats retrieval", status_code=503)
