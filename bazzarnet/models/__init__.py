"""
Models module initialization
"""

from .product import ProductBase, ProductCategory, ProductUnit, StoreSummary, ALL_CATEGORIES
from .review import Review, Reviewer
from .store import Store, StoreAddress
from .order import Order, OrderItem, OrderStatus
from .user import User, UserRole, VendorProfile, VendorAddress

__all__ = [
    "ProductBase",
    "ProductCategory",
    "ProductUnit",
    "StoreSummary",
    "ALL_CATEGORIES",
    "Review",
    "Reviewer",
    "Store",
    "StoreAddress",
    "Order",
    "OrderItem",
    "OrderStatus",
    "User",
    "UserRole",
    "VendorProfile",
    "VendorAddress",
]
