from pydantic import BaseModel
from typing import List

from app.models.product import Product


class ProductListResponse(BaseModel):
    total: int
    page: int
    limit: int
    products: List[Product]


class ProductDeleteResponse(BaseModel):
    message: str
    product: Product


class ErrorResponse(BaseModel):
    error: str
