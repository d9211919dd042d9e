"""Pydantic schemas for request/response validation."""

from catalog.schemas.common import DataResponse, MessageResponse
from catalog.schemas.product import ProductCreate, ProductResponse, ProductUpdate

__all__ = [
    "DataResponse",
    "MessageResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
