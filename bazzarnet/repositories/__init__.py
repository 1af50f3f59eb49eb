"""
Repositories module initialization
"""

from .product import ProductRepository
from .review import ReviewRepository
from .store import StoreRepository
from .order import OrderRepository
from .user import UserRepository

__all__ = [
    "ProductRepository",
    "ReviewRepository",
    "StoreRepository",
    "OrderRepository",
    "UserRepository",
]
