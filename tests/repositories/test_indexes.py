"""Tests for index creation and the transaction helper"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import OperationFailure

from bazzarnet.db.indexes import create_indexes
from bazzarnet.db.mongodb import REVIEWS, transaction


@pytest.fixture
def mock_database():
    collections = {}

    def get_collection(name):
        return collections.setdefault(name, AsyncMock())

    database = MagicMock()
    database.__getitem__.side_effect = get_collection
    database.collections = collections
    return database


class TestCreateIndexes:

    @pytest.mark.asyncio
    async def test_unique_review_index(self, mock_database):
        await create_indexes(mock_database)

        reviews = mock_database.collections[REVIEWS]
        unique_calls = [c for c in reviews.create_index.await_args_list if c.kwargs.get("unique")]
        assert len(unique_calls) == 1
        assert unique_calls[0].args[0] == [("user", 1), ("product", 1)]

    @pytest.mark.asyncio
    async def test_failure_propagates(self, mock_database):
        mock_database["products"].create_index.side_effect = OperationFailure("index conflict")

        with pytest.raises(OperationFailure):
            await create_indexes(mock_database)


class TestTransaction:

    @pytest.mark.asyncio
    async def test_disabled_yields_no_session(self):
        async with transaction() as session:
            assert session is None
