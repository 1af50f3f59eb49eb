"""
API schemas for admin endpoints
"""

from pydantic import BaseModel


class DashboardStatsResponse(BaseModel):
    """Catalog figures for the admin dashboard"""
    total_products: int
    active_products: int
    total_stores: int
    active_stores: int
    total_reviews: int
