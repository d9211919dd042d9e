"""Product service for CRUD operations."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import NotFoundError, UnexpectedError
from catalog.models.product import Product
from catalog.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"


class ProductService:
    """Service class for product operations.

    Store failures are rolled back, logged and re-raised as UnexpectedError so
    the API layer can answer with the error envelope.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[Product]:
        """Get all products in natural store order."""
        try:
            result = await self.db.execute(select(Product).order_by(Product.id))
        except SQLAlchemyError as e:
            raise await self._unexpected("list products", e) from e
        return list(result.scalars().all())

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID

        Returns:
            Product or None if not found
        """
        try:
            return await self.db.get(Product, product_id)
        except SQLAlchemyError as e:
            raise await self._unexpected(f"load product {product_id}", e) from e

    async def get_or_404(self, product_id: int) -> Product:
        """Get product by ID, raising NotFoundError when it does not exist."""
        product = await self.get_by_id(product_id)
        if product is None:
            logger.info(f"Product {product_id} not found")
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product

    async def create(self, product_data: ProductCreate) -> Product:
        """Create a new product.

        Args:
            product_data: Validated product creation data

        Returns:
            Created product with its assigned id and timestamps
        """
        product = Product(
            name=product_data.name,
            description=product_data.description,
            price=product_data.price,
            quantity=product_data.quantity,
        )

        self.db.add(product)
        try:
            await self.db.commit()
            await self.db.refresh(product)
        except SQLAlchemyError as e:
            raise await self._unexpected("create product", e) from e

        logger.info(f"Created product {product.id}")
        return product

    async def update(self, product_id: int, product_data: ProductUpdate) -> Product:
        """Apply a partial update to a product.

        Only fields present in the payload are changed. The payload has
        already passed validation as a whole, so either every supplied field
        is written or none is.

        Args:
            product_id: Product ID
            product_data: Validated partial update

        Returns:
            The full updated product

        Raises:
            NotFoundError: If the product does not exist
        """
        product = await self.get_or_404(product_id)

        changes = product_data.changes()
        for field, value in changes.items():
            setattr(product, field, value)

        try:
            await self.db.commit()
            await self.db.refresh(product)
        except SQLAlchemyError as e:
            raise await self._unexpected(f"update product {product_id}", e) from e

        logger.info(f"Updated product {product_id} fields={sorted(changes)}")
        return product

    async def delete(self, product_id: int) -> None:
        """Permanently delete a product.

        Raises:
            NotFoundError: If the product does not exist
        """
        product = await self.get_or_404(product_id)

        try:
            await self.db.delete(product)
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._unexpected(f"delete product {product_id}", e) from e

        logger.info(f"Deleted product {product_id}")

    async def _unexpected(self, action: str, error: SQLAlchemyError) -> UnexpectedError:
        logger.exception(f"Failed to {action}: {error}")
        await self.db.rollback()
        return UnexpectedError()
