"""
Read access to the users collection
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from bazzarnet.core.errors import ErrorResponse
from bazzarnet.core.logger import logger
from bazzarnet.models.user import VendorProfile
from bazzarnet.utils.validators import as_reference

VENDOR_PROFILE_FIELDS = {"name": 1, "description": 1, "category": 1, "phone": 1, "address": 1}


class UserRepository:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def get_vendor_profile(self, user_id: str) -> Optional[VendorProfile]:
        try:
            doc = await self.collection.find_one({"_id": as_reference(user_id)}, VENDOR_PROFILE_FIELDS)
        except PyMongoError as e:
            logger.error(f"MongoDB error loading vendor profile: {e}")
            raise ErrorResponse("Database error during profile lookup", status_code=503)

        if not doc:
            return None
        doc["id"] = str(doc.pop("_id"))
        doc["address"] = doc.get("address") or {}
        return VendorProfile(**doc)
