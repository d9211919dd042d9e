"""Client for the product API and the state store built on it."""

from catalog.client.api_client import ApiResult, ProductApiClient
from catalog.client.state import ProductState, reduce
from catalog.client.store import ProductStore

__all__ = [
    "ApiResult",
    "ProductApiClient",
    "ProductState",
    "ProductStore",
    "reduce",
]
