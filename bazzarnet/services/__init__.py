"""
Services module initialization
"""

from .product import ProductService
from .review import ReviewService
from .admin import AdminService

__all__ = [
    "ProductService",
    "ReviewService",
    "AdminService",
]
