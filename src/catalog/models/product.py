"""Product model for catalog data."""

from decimal import Decimal

from sqlalchemy import CheckConstraint, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.core.database import Base
from catalog.models.base import TimestampMixin


class Product(Base, TimestampMixin):
    """Product model representing a catalog item."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
    )
    quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="chk_product_price_non_negative"),
        CheckConstraint("quantity >= 0", name="chk_product_quantity_non_negative"),
        # Deleted ids are never handed out again
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
