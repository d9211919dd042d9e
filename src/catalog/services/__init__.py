"""Business logic services."""

from catalog.services.product_service import ProductService

__all__ = [
    "ProductService",
]
