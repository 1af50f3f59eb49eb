"""
Product repository for data access layer following Repository pattern
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from bazzarnet.core.errors import ErrorResponse
from bazzarnet.core.logger import logger
from bazzarnet.schemas.product import ProductResponse, RecommendedProduct
from bazzarnet.utils.validators import to_object_id

RECOMMENDED_FIELDS = (
    "name", "image", "price", "original_price", "store",
    "unit", "category", "rating", "num_reviews",
)


class ProductRepository:
    """Repository for product data access operations"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    @staticmethod
    def _stringify_ids(doc: dict) -> dict:
        doc = dict(doc)
        doc["id"] = str(doc.pop("_id"))
        if isinstance(doc.get("store"), ObjectId):
            doc["store"] = str(doc["store"])
        return doc

    def _doc_to_response(self, doc: Optional[dict]) -> Optional[ProductResponse]:
        """Convert MongoDB document to ProductResponse schema"""
        if not doc:
            return None
        return ProductResponse(**self._stringify_ids(doc))

    async def create(self, document: Dict[str, Any]) -> ProductResponse:
        """Insert a fully prepared product document"""
        try:
            result = await self.collection.insert_one(document)
            created_doc = await self.collection.find_one({"_id": result.inserted_id})
            return self._doc_to_response(created_doc)
        except PyMongoError as e:
            logger.error(f"MongoDB error creating product: {e}")
            raise ErrorResponse("Database error during product creation", status_code=503)

    async def get_by_id(self, product_id: str) -> Optional[ProductResponse]:
        """Get product by ID; malformed ids are treated as missing"""
        object_id = to_object_id(product_id)
        if object_id is None:
            return None

        try:
            doc = await self.collection.find_one({"_id": object_id})
            return self._doc_to_response(doc)
        except PyMongoError as e:
            logger.error(f"MongoDB error getting product: {e}")
            raise ErrorResponse("Database error during product retrieval", status_code=503)

    async def count(self, query: Dict[str, Any]) -> int:
        try:
            return await self.collection.count_documents(query)
        except PyMongoError as e:
            logger.error(f"MongoDB error counting products: {e}")
            raise ErrorResponse("Database error during product search", status_code=503)

    async def find_page(self, query: Dict[str, Any], skip: int, limit: int) -> List[ProductResponse]:
        """Fetch one slice of the products matching query, in insertion order"""
        try:
            cursor = self.collection.find(query).sort("_id", ASCENDING).skip(skip).limit(limit)
            docs = await cursor.to_list(length=limit)
            return [self._doc_to_response(doc) for doc in docs]
        except PyMongoError as e:
            logger.error(f"MongoDB error during search: {e}")
            raise ErrorResponse("Database error during product search", status_code=503)

    async def sample(self, query: Dict[str, Any], size: int) -> List[RecommendedProduct]:
        """Uniform random sample without replacement of up to size matching products"""
        pipeline = [
            {"$match": query},
            {"$sample": {"size": size}},
            {"$project": {field: 1 for field in RECOMMENDED_FIELDS}},
        ]
        try:
            docs = await self.collection.aggregate(pipeline).to_list(length=size)
            return [RecommendedProduct(**self._stringify_ids(doc)) for doc in docs]
        except PyMongoError as e:
            logger.error(f"MongoDB error sampling products: {e}")
            raise ErrorResponse("Database error during product recommendation", status_code=503)

    async def update_fields(self, product_id: str, fields: Dict[str, Any]) -> Optional[ProductResponse]:
        """Set the given fields and bump updated_at; returns the updated product"""
        object_id = to_object_id(product_id)
        if object_id is None:
            return None

        update = {**fields, "updated_at": datetime.now(timezone.utc)}
        try:
            doc = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": update},
                return_document=ReturnDocument.AFTER,
            )
            return self._doc_to_response(doc)
        except PyMongoError as e:
            logger.error(f"MongoDB error updating product: {e}")
            raise ErrorResponse("Database error during product update", status_code=503)

    async def delete(self, product_id: str) -> bool:
        """Hard delete a product"""
        object_id = to_object_id(product_id)
        if object_id is None:
            return False

        try:
            result = await self.collection.delete_one({"_id": object_id})
            return result.deleted_count > 0
        except PyMongoError as e:
            logger.error(f"MongoDB error deleting product: {e}")
            raise ErrorResponse("Database error during product deletion", status_code=503)

    async def set_review_aggregates(self, product_id: str, rating: float, num_reviews: int, session=None) -> None:
        """Overwrite the derived rating fields"""
        try:
            await self.collection.update_one(
                {"_id": to_object_id(product_id)},
                {"$set": {
                    "rating": rating,
                    "num_reviews": num_reviews,
                    "updated_at": datetime.now(timezone.utc),
                }},
                session=session,
            )
        except PyMongoError as e:
            logger.error(f"MongoDB error updating review aggregates: {e}")
            raise ErrorResponse("Database error during rating update", status_code=503)

    async def get_stats(self) -> Dict[str, int]:
        """Get product statistics for admin dashboard"""
        try:
            total = await self.collection.count_documents({})
            active = await self.collection.count_documents({"is_active": True})
            return {"total": total, "active": active}
        except PyMongoError as e:
            logger.error(f"MongoDB error getting stats: {e}")
            raise ErrorResponse("Database error during stats retrieval", status_code=503)
