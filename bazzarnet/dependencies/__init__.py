"""
Dependencies module initialization
"""

from .auth import get_current_user, require_admin, require_customer, require_vendor
from .services import get_admin_service, get_product_service, get_review_service

__all__ = [
    "get_current_user",
    "require_admin",
    "require_customer",
    "require_vendor",
    "get_admin_service",
    "get_product_service",
    "get_review_service",
]
