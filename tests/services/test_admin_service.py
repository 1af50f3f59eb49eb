"""Unit tests for AdminService"""
from unittest.mock import AsyncMock

import pytest

from bazzarnet.core.errors import NotFoundError
from bazzarnet.repositories.product import ProductRepository
from bazzarnet.repositories.review import ReviewRepository
from bazzarnet.repositories.store import StoreRepository
from bazzarnet.repositories.user import UserRepository
from bazzarnet.services.admin import AdminService
from bazzarnet.services.product import ProductService

PRODUCT_ID = "507f1f77bcf86cd799439011"
OTHER_STORE_ID = "64b7f0c2a1b2c3d4e5f60799"


@pytest.fixture
def mock_product_repository():
    return AsyncMock(spec=ProductRepository)


@pytest.fixture
def mock_store_repository():
    return AsyncMock(spec=StoreRepository)


@pytest.fixture
def mock_review_repository():
    return AsyncMock(spec=ReviewRepository)


@pytest.fixture
def admin_service(mock_product_repository, mock_store_repository, mock_review_repository):
    product_service = ProductService(
        mock_product_repository, mock_store_repository, AsyncMock(spec=UserRepository)
    )
    return AdminService(product_service, mock_store_repository, mock_review_repository)


class TestAdminProductManagement:

    @pytest.mark.asyncio
    async def test_admin_updates_any_store_product(
        self, admin_service, mock_product_repository, admin_user, make_product
    ):
        mock_product_repository.get_by_id.return_value = make_product(store_id=OTHER_STORE_ID)
        mock_product_repository.update_fields.return_value = make_product(store_id=OTHER_STORE_ID, is_active=False)

        result = await admin_service.update_product(admin_user, PRODUCT_ID, {"is_active": False})

        mock_product_repository.update_fields.assert_awaited_once_with(PRODUCT_ID, {"is_active": False})
        assert result.is_active is False

    @pytest.mark.asyncio
    async def test_update_missing_product(self, admin_service, mock_product_repository, admin_user):
        mock_product_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await admin_service.update_product(admin_user, PRODUCT_ID, {"price": 10})

    @pytest.mark.asyncio
    async def test_admin_deletes_any_product(self, admin_service, mock_product_repository, admin_user):
        mock_product_repository.delete.return_value = True

        await admin_service.delete_product(admin_user, PRODUCT_ID)

        mock_product_repository.delete.assert_awaited_once_with(PRODUCT_ID)

    @pytest.mark.asyncio
    async def test_delete_missing_product(self, admin_service, mock_product_repository, admin_user):
        mock_product_repository.delete.return_value = False

        with pytest.raises(NotFoundError):
            await admin_service.delete_product(admin_user, PRODUCT_ID)


class TestDashboardStats:

    @pytest.mark.asyncio
    async def test_collects_counts(
        self, admin_service, mock_product_repository, mock_store_repository, mock_review_repository
    ):
        mock_product_repository.get_stats.return_value = {"total": 12, "active": 10}
        mock_store_repository.get_stats.return_value = {"total": 3, "active": 2}
        mock_review_repository.count.return_value = 7

        stats = await admin_service.get_dashboard_stats()

        assert stats.model_dump() == {
            "total_products": 12,
            "active_products": 10,
            "total_stores": 3,
            "active_stores": 2,
            "total_reviews": 7,
        }
