"""API v1 routers."""

from catalog.api.v1 import products

__all__ = ["products"]
