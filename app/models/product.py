import math
import sys
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool = Field(alias="inStock")


class ProductCreate(ProductBase):
    """Incoming product payload, used for both create and full-replace update.

    Strict mode keeps JSON types honest: "12" is not a price and 1 is not a boolean.
    """
    model_config = ConfigDict(populate_by_name=True, strict=True)

    @field_validator("name", "description", "category")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("price")
    @classmethod
    def finite_price(cls, value: Union[int, float]) -> Union[int, float]:
        if isinstance(value, bool):
            raise ValueError("must be a finite number")
        # Integers beyond float range cannot be converted for the finiteness check
        if isinstance(value, int):
            if abs(value) > sys.float_info.max:
                raise ValueError("must be a finite number")
        elif not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value


class Product(ProductBase):
    id: str

    @classmethod
    def from_payload(cls, product_id: str, payload: ProductCreate) -> "Product":
        return cls(id=product_id, **payload.model_dump())
