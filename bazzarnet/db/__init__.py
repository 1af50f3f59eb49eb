"""
Database module initialization
"""

from .mongodb import db, connect_to_mongo, close_mongo_connection, get_database, get_collection, transaction
from .indexes import create_indexes

__all__ = [
    "db",
    "connect_to_mongo",
    "close_mongo_connection",
    "get_database",
    "get_collection",
    "transaction",
    "create_indexes",
]
