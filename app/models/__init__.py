# Import all models for easy access
from .product import Product, ProductBase, ProductCreate

__all__ = [
    "Product", "ProductBase", "ProductCreate",
]
