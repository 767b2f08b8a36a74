from typing import Any

from pydantic import ValidationError

from app.entities.outcome import Failure, Outcome, Success
from app.models.product import ProductCreate
import structlog

logger = structlog.get_logger()

INVALID_PRODUCT_MESSAGE = "Invalid product data. All fields are required and must be of correct type."


def validate_product(payload: Any) -> Outcome[ProductCreate]:
    """
    Check a candidate payload against the product schema.

    Succeeds only when name, description and category are non-blank strings,
    price is a finite number and inStock is a boolean. Field-level detail is
    logged; the caller only sees the generic validation message.
    """
    if not isinstance(payload, dict):
        logger.info("Product payload rejected", reason="body is not a JSON object")
        return Failure.validation(INVALID_PRODUCT_MESSAGE)

    try:
        return Success(ProductCreate.model_validate(payload))
    except ValidationError as e:
        logger.info(
            "Product payload rejected",
            fields=[".".join(str(part) for part in err["loc"]) for err in e.errors()],
        )
        return Failure.validation(INVALID_PRODUCT_MESSAGE)
