"""SQLAlchemy ORM models."""

from catalog.models.base import TimestampMixin
from catalog.models.product import Product

__all__ = [
    "TimestampMixin",
    "Product",
]
