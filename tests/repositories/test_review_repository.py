"""Tests for ReviewRepository"""
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from bazzarnet.core.errors import ConflictError
from bazzarnet.models.review import Reviewer
from bazzarnet.repositories.review import ALREADY_REVIEWED, ReviewRepository

PRODUCT_ID = "507f1f77bcf86cd799439011"
CUSTOMER_ID = "650000000000000000000002"
REVIEW_ID = "660000000000000000000001"


@pytest.fixture
def repository(mock_collection):
    return ReviewRepository(mock_collection)


class TestCreateReview:

    @pytest.mark.asyncio
    async def test_stores_references_as_object_ids(self, repository, mock_collection):
        mock_collection.insert_one.return_value = MagicMock(inserted_id=ObjectId(REVIEW_ID))

        review = await repository.create(CUSTOMER_ID, PRODUCT_ID, 5, "Great")

        document = mock_collection.insert_one.await_args.args[0]
        assert document["user"] == ObjectId(CUSTOMER_ID)
        assert document["product"] == ObjectId(PRODUCT_ID)
        assert review.id == REVIEW_ID
        assert review.user == CUSTOMER_ID

    @pytest.mark.asyncio
    async def test_duplicate_key_is_a_conflict(self, repository, mock_collection):
        mock_collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error")

        with pytest.raises(ConflictError) as exc_info:
            await repository.create(CUSTOMER_ID, PRODUCT_ID, 5, "Great")

        assert exc_info.value.message == ALREADY_REVIEWED

    @pytest.mark.asyncio
    async def test_exists_for(self, repository, mock_collection):
        mock_collection.find_one.return_value = {"_id": ObjectId(REVIEW_ID)}
        assert await repository.exists_for(CUSTOMER_ID, PRODUCT_ID) is True

        mock_collection.find_one.return_value = None
        assert await repository.exists_for(CUSTOMER_ID, PRODUCT_ID) is False


class TestRatingSummary:

    @pytest.mark.asyncio
    async def test_groups_over_product_reviews(self, repository, mock_collection, make_cursor):
        mock_collection.aggregate.return_value = make_cursor([{"_id": None, "average": 4.5, "count": 2}])

        assert await repository.rating_summary(PRODUCT_ID) == (4.5, 2)

        pipeline = mock_collection.aggregate.call_args.args[0]
        assert pipeline[0] == {"$match": {"product": ObjectId(PRODUCT_ID)}}
        assert pipeline[1]["$group"]["average"] == {"$avg": "$rating"}

    @pytest.mark.asyncio
    async def test_no_reviews(self, repository, mock_collection, make_cursor):
        mock_collection.aggregate.return_value = make_cursor([])

        assert await repository.rating_summary(PRODUCT_ID) == (0.0, 0)


class TestListForProduct:

    @pytest.mark.asyncio
    async def test_newest_first_with_reviewer(self, repository, mock_collection, make_cursor):
        mock_collection.aggregate.return_value = make_cursor([{
            "_id": ObjectId(REVIEW_ID),
            "user": ObjectId(CUSTOMER_ID),
            "product": ObjectId(PRODUCT_ID),
            "rating": 4,
            "comment": "Good",
            "created_at": datetime(2024, 2, 1, tzinfo=timezone.utc),
            "reviewer": {"name": "Asha", "profile_image": "asha.png"},
        }])

        reviews = await repository.list_for_product(PRODUCT_ID)

        pipeline = mock_collection.aggregate.call_args.args[0]
        assert pipeline[1] == {"$sort": {"created_at": -1, "_id": -1}}
        assert reviews[0].user == Reviewer(id=CUSTOMER_ID, name="Asha", profile_image="asha.png")

    @pytest.mark.asyncio
    async def test_deleted_author_keeps_review(self, repository, mock_collection, make_cursor):
        mock_collection.aggregate.return_value = make_cursor([{
            "_id": ObjectId(REVIEW_ID),
            "user": ObjectId(CUSTOMER_ID),
            "product": ObjectId(PRODUCT_ID),
            "rating": 2,
            "comment": "Stale",
            "created_at": datetime(2024, 2, 1, tzinfo=timezone.utc),
        }])

        reviews = await repository.list_for_product(PRODUCT_ID)

        assert reviews[0].user.name is None

    @pytest.mark.asyncio
    async def test_malformed_product_id(self, repository, mock_collection):
        assert await repository.list_for_product("nope") == []
        mock_collection.aggregate.assert_not_called()
