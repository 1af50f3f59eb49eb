"""Fixtures for API tests: the app with repositories replaced by mocks"""
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from bazzarnet.dependencies.auth import get_current_user
from bazzarnet.dependencies.services import (
    get_admin_service,
    get_product_service,
    get_review_service,
)
from bazzarnet.repositories import (
    OrderRepository,
    ProductRepository,
    ReviewRepository,
    StoreRepository,
    UserRepository,
)
from bazzarnet.services import AdminService, ProductService, ReviewService
from main import app


@pytest.fixture
def repositories(complete_profile):
    repos = {
        "product": AsyncMock(spec=ProductRepository),
        "store": AsyncMock(spec=StoreRepository),
        "user": AsyncMock(spec=UserRepository),
        "review": AsyncMock(spec=ReviewRepository),
        "order": AsyncMock(spec=OrderRepository),
    }
    repos["store"].get_summaries.return_value = {}
    repos["user"].get_vendor_profile.return_value = complete_profile
    return repos


@pytest.fixture
def client(repositories):
    """TestClient with real services over mocked repositories; no MongoDB needed"""
    product_service = ProductService(repositories["product"], repositories["store"], repositories["user"])
    review_service = ReviewService(repositories["review"], repositories["product"], repositories["order"])
    admin_service = AdminService(product_service, repositories["store"], repositories["review"])

    app.dependency_overrides[get_product_service] = lambda: product_service
    app.dependency_overrides[get_review_service] = lambda: review_service
    app.dependency_overrides[get_admin_service] = lambda: admin_service

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def login():
    """Authenticate subsequent requests as the given user"""
    def _login(user):
        app.dependency_overrides[get_current_user] = lambda: user
    return _login
