from .mongo_connection import get_database, close_database, get_product_collection, get_category_collection
from .mongo_product_repository import MongoProductRepository

__all__ = [
    "get_database",
    "close_database",
    "get_product_collection",
    "get_category_collection",
    "MongoProductRepository",
]
