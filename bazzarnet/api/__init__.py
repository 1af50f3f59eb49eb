"""
API module initialization
"""

from . import products, reviews, admin, health, operational, home

__all__ = ["products", "reviews", "admin", "health", "operational", "home"]
