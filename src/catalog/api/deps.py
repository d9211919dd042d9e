"""API dependencies for database access and path parsing."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.database import get_db
from catalog.core.exceptions import NotFoundError
from catalog.services.product_service import PRODUCT_NOT_FOUND, ProductService

# ids live in an INTEGER column
MAX_PRODUCT_ID = 2_147_483_647


def get_product_id(product_id: str) -> int:
    """Parse the ``{product_id}`` path segment.

    A segment that is not a positive integer can never match a product, so it
    is answered as not found rather than as a validation failure.
    """
    if not (product_id.isascii() and product_id.isdigit()):
        raise NotFoundError(PRODUCT_NOT_FOUND)
    if not 1 <= int(product_id) <= MAX_PRODUCT_ID:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return int(product_id)


async def get_product_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductService:
    """Get ProductService instance bound to the request session."""
    return ProductService(db)


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
ProductId = Annotated[int, Depends(get_product_id)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
