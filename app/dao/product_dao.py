from typing import List, Optional
import uuid

from app.core.config import settings
from app.dao.base_dao import BaseDAO
from app.models.product import Product, ProductCreate
import structlog

logger = structlog.get_logger()

SAMPLE_PRODUCTS = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class InMemoryProductDAO(BaseDAO[Product, ProductCreate]):
    """
    Ordered, process-local product store.

    None of the methods await, so each call runs to completion on the event
    loop and mutations are serialized without a lock.
    """

    def __init__(self, seed: bool = True):
        self.seed = seed
        self._products: List[Product] = []
        self._load_seed()

    def _load_seed(self) -> None:
        if self.seed:
            self._products = [Product.model_validate(p) for p in SAMPLE_PRODUCTS]

    def _index_of(self, id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == id:
                return index
        return -1

    async def create(self, obj_in: ProductCreate) -> Product:
        product = Product.from_payload(str(uuid.uuid4()), obj_in)
        self._products.append(product)
        logger.info("Created Product", id=product.id)
        return product

    async def get_by_id(self, id: str) -> Optional[Product]:
        index = self._index_of(id)
        return self._products[index] if index != -1 else None

    async def list_all(self) -> List[Product]:
        return list(self._products)

    async def update(self, id: str, obj_in: ProductCreate) -> Optional[Product]:
        index = self._index_of(id)
        if index == -1:
            return None
        # Full replacement; only the id survives
        product = Product.from_payload(self._products[index].id, obj_in)
        self._products[index] = product
        logger.info("Updated Product", id=id)
        return product

    async def delete(self, id: str) -> Optional[Product]:
        index = self._index_of(id)
        if index == -1:
            return None
        product = self._products.pop(index)
        logger.info("Deleted Product", id=id)
        return product

    async def reset(self) -> None:
        self._products = []
        self._load_seed()

    def __len__(self) -> int:
        return len(self._products)


product_dao = InMemoryProductDAO(seed=settings.seed_sample_data)
