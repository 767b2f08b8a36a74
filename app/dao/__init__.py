# Export all DAO classes
from .base_dao import BaseDAO
from .product_dao import InMemoryProductDAO, product_dao

__all__ = [
    "BaseDAO",
    "InMemoryProductDAO",
    "product_dao",
]
