"""
Review repository. Reviews live in their own collection and reference the
product and the author by id.
"""

from datetime import datetime, timezone
from typing import List, Tuple

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from bazzarnet.core.errors import ConflictError, ErrorResponse
from bazzarnet.core.logger import logger
from bazzarnet.db.mongodb import USERS
from bazzarnet.models.review import Review, Reviewer
from bazzarnet.schemas.review import ReviewResponse
from bazzarnet.utils.validators import as_reference, to_object_id

ALREADY_REVIEWED = "You have already reviewed this product."


class ReviewRepository:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def exists_for(self, user_id: str, product_id: str) -> bool:
        try:
            doc = await self.collection.find_one(
                {"user": as_reference(user_id), "product": to_object_id(product_id)},
                {"_id": 1},
            )
            return doc is not None
        except PyMongoError as e:
            logger.error(f"MongoDB error checking review: {e}")
            raise ErrorResponse("Database error during review lookup", status_code=503)

    async def create(self, user_id: str, product_id: str, rating: int, comment: str, session=None) -> Review:
        """Insert a review; the unique (user, product) index rejects duplicates"""
        document = {
            "user": as_reference(user_id),
            "product": to_object_id(product_id),
            "rating": rating,
            "comment": comment,
            "created_at": datetime.now(timezone.utc),
        }
        try:
            result = await self.collection.insert_one(document, session=session)
        except DuplicateKeyError:
            raise ConflictError(ALREADY_REVIEWED)
        except PyMongoError as e:
            logger.error(f"MongoDB error creating review: {e}")
            raise ErrorResponse("Database error during review creation", status_code=503)

        return Review(
            id=str(result.inserted_id),
            user=str(document["user"]),
            product=str(document["product"]),
            rating=rating,
            comment=comment,
            created_at=document["created_at"],
        )

    async def rating_summary(self, product_id: str, session=None) -> Tuple[float, int]:
        """
        Mean rating and review count over every stored review of the product,
        (0.0, 0) when there are none. Computed from scratch on each call.
        """
        pipeline = [
            {"$match": {"product": to_object_id(product_id)}},
            {"$group": {"_id": None, "average": {"$avg": "$rating"}, "count": {"$sum": 1}}},
        ]
        try:
            results = await self.collection.aggregate(pipeline, session=session).to_list(length=1)
        except PyMongoError as e:
            logger.error(f"MongoDB error aggregating ratings: {e}")
            raise ErrorResponse("Database error during rating calculation", status_code=503)

        if not results:
            return 0.0, 0
        return float(results[0]["average"]), int(results[0]["count"])

    async def list_for_product(self, product_id: str) -> List[ReviewResponse]:
        """Reviews of a product, newest first, with the author's name and image"""
        product_object_id = to_object_id(product_id)
        if product_object_id is None:
            return []

        pipeline = [
            {"$match": {"product": product_object_id}},
            {"$sort": {"created_at": -1, "_id": -1}},
            {"$lookup": {
                "from": USERS,
                "localField": "user",
                "foreignField": "_id",
                "as": "reviewer",
            }},
            {"$unwind": {"path": "$reviewer", "preserveNullAndEmptyArrays": True}},
            {"$project": {
                "user": 1, "product": 1, "rating": 1, "comment": 1, "created_at": 1,
                "reviewer.name": 1, "reviewer.profile_image": 1,
            }},
        ]
        try:
            docs = await self.collection.aggregate(pipeline).to_list(length=None)
        except PyMongoError as e:
            logger.error(f"MongoDB error listing reviews: {e}")
            raise ErrorResponse("Database error during review retrieval", status_code=503)

        return [self._doc_to_response(doc) for doc in docs]

    @staticmethod
    def _doc_to_response(doc: dict) -> ReviewResponse:
        reviewer = doc.get("reviewer") or {}
        return ReviewResponse(
            id=str(doc["_id"]),
            user=Reviewer(
                id=str(doc["user"]),
                name=reviewer.get("name"),
                profile_image=reviewer.get("profile_image"),
            ),
            product=str(doc["product"]),
            rating=doc["rating"],
            comment=doc.get("comment", ""),
            created_at=doc["created_at"],
        )

    async def count(self) -> int:
        try:
            return await self.collection.count_documents({})
        except PyMongoError as e:
            logger.error(f"MongoDB error counting reviews: {e}")
            raise ErrorResponse("Database error during stats retrieval", status_code=503)
