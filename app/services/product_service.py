from typing import Any, Dict, List, Optional

from app.dao.base_dao import BaseDAO
from app.dao.product_dao import product_dao
from app.entities.outcome import Failure, Outcome, Success
from app.models.product import Product, ProductCreate
from app.services.product_validator import validate_product
import structlog

logger = structlog.get_logger()

SEARCH_TERM_REQUIRED_MESSAGE = "Name query parameter is required"


class ProductService:
    def __init__(self, dao: Optional[BaseDAO[Product, ProductCreate]] = None):
        self.product_dao = dao if dao is not None else product_dao

    async def list_products(
        self, category: Optional[str] = None, page: int = 1, limit: int = 10
    ) -> Outcome[Dict[str, Any]]:
        """Filter by exact category, then slice one page. Pages past the end are empty."""
        products = await self.product_dao.list_all()
        if category:
            products = [p for p in products if p.category == category]

        start = (page - 1) * limit
        page_items = products[start:start + limit]
        logger.info(
            "Retrieved products",
            category=category,
            page=page,
            limit=limit,
            total=len(products),
            count=len(page_items),
        )
        return Success({
            "total": len(products),
            "page": page,
            "limit": limit,
            "products": page_items,
        })

    async def get_product(self, product_id: str) -> Outcome[Product]:
        product = await self.product_dao.get_by_id(product_id)
        if product is None:
            logger.warning("Product not found", product_id=product_id)
            return Failure.not_found()
        return Success(product)

    async def create_product(self, payload: Any) -> Outcome[Product]:
        validated = validate_product(payload)
        if isinstance(validated, Failure):
            return validated

        product = await self.product_dao.create(validated.value)
        logger.info("Product created successfully", product_id=product.id)
        return Success(product)

    async def update_product(self, product_id: str, payload: Any) -> Outcome[Product]:
        validated = validate_product(payload)
        if isinstance(validated, Failure):
            return validated

        product = await self.product_dao.update(product_id, validated.value)
        if product is None:
            logger.warning("Product not found for update", product_id=product_id)
            return Failure.not_found()

        logger.info("Product updated successfully", product_id=product_id)
        return Success(product)

    async def delete_product(self, product_id: str) -> Outcome[Product]:
        product = await self.product_dao.delete(product_id)
        if product is None:
            logger.warning("Product not found for delete", product_id=product_id)
            return Failure.not_found()

        logger.info("Product deleted successfully", product_id=product_id)
        return Success(product)

    async def search_products(self, name: Optional[str]) -> Outcome[List[Product]]:
        """Case-insensitive substring match on the product name, in store order."""
        if not name:
            return Failure.bad_request(SEARCH_TERM_REQUIRED_MESSAGE)

        term = name.lower()
        products = [p for p in await self.product_dao.list_all() if term in p.name.lower()]
        logger.info("Searched products by name", name=name, count=len(products))
        return Success(products)

    async def get_category_stats(self) -> Outcome[Dict[str, int]]:
        stats: Dict[str, int] = {}
        for product in await self.product_dao.list_all():
            stats[product.category] = stats.get(product.category, 0) + 1
        return Success(stats)


product_service = ProductService()
