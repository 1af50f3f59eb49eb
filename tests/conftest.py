"""Shared test fixtures"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId

from bazzarnet.models.user import User, VendorAddress, VendorProfile
from bazzarnet.schemas.product import ProductResponse

PRODUCT_ID = "507f1f77bcf86cd799439011"
STORE_ID = "64b7f0c2a1b2c3d4e5f60718"
OTHER_STORE_ID = "64b7f0c2a1b2c3d4e5f60799"
VENDOR_ID = "650000000000000000000001"
CUSTOMER_ID = "650000000000000000000002"
ADMIN_ID = "650000000000000000000003"


def make_cursor(docs):
    """Motor-style cursor: chainable sort/skip/limit and an awaitable to_list"""
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=docs)
    return cursor


def make_product_doc(product_id=PRODUCT_ID, store_id=STORE_ID, **overrides):
    doc = {
        "_id": ObjectId(product_id),
        "name": "Basmati Rice",
        "description": "Aged long grain rice",
        "price": 120.0,
        "original_price": 140.0,
        "stock": 50,
        "unit": "kg",
        "category": "Groceries",
        "image": "https://example.com/rice.png",
        "store": ObjectId(store_id),
        "rating": 0.0,
        "num_reviews": 0,
        "is_active": True,
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "updated_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    doc.update(overrides)
    return doc


def make_product(product_id=PRODUCT_ID, store_id=STORE_ID, **overrides) -> ProductResponse:
    doc = make_product_doc(product_id, store_id, **overrides)
    doc["id"] = str(doc.pop("_id"))
    doc["store"] = str(doc["store"])
    return ProductResponse(**doc)


@pytest.fixture
def mock_collection():
    """Mock Motor collection; find and aggregate return cursors synchronously"""
    collection = AsyncMock()
    collection.find = MagicMock(return_value=make_cursor([]))
    collection.aggregate = MagicMock(return_value=make_cursor([]))
    return collection


@pytest.fixture
def product_id():
    return PRODUCT_ID


@pytest.fixture
def vendor_user():
    return User(id=VENDOR_ID, email="vendor@example.com", roles=["vendor"], store_id=STORE_ID)


@pytest.fixture
def other_vendor_user():
    return User(id="650000000000000000000009", email="other@example.com", roles=["vendor"], store_id=OTHER_STORE_ID)


@pytest.fixture
def customer_user():
    return User(id=CUSTOMER_ID, email="customer@example.com", roles=["customer"])


@pytest.fixture
def admin_user():
    return User(id=ADMIN_ID, email="admin@example.com", roles=["admin"])


@pytest.fixture
def complete_profile():
    return VendorProfile(
        id=VENDOR_ID,
        name="Sharma Kirana",
        description="Neighbourhood grocery",
        category="Groceries",
        phone="9800000000",
        address=VendorAddress(
            house_no="12", street="MG Road", city="Pune",
            state="Maharashtra", pin_code="411001", mobile="9800000001",
        ),
    )


@pytest.fixture
def store_id():
    return STORE_ID


@pytest.fixture
def other_store_id():
    return OTHER_STORE_ID


@pytest.fixture(name="make_product")
def make_product_fixture():
    """Factory for ProductResponse objects"""
    return make_product


@pytest.fixture(name="make_product_doc")
def make_product_doc_fixture():
    """Factory for raw MongoDB product documents"""
    return make_product_doc


@pytest.fixture(name="make_cursor")
def make_cursor_fixture():
    return make_cursor
