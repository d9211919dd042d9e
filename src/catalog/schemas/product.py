"""Product schemas for request/response validation.

Input strings are trimmed before the rules run, an empty description is
stored as null, and prices are rounded half-up to cents. The upper bounds
match the ``NUMERIC(10, 2)`` and ``INTEGER`` columns so an oversized value
is a validation error rather than a database failure.
"""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

PRICE_QUANTUM = Decimal("0.01")
MAX_PRICE = Decimal("99999999.99")
MAX_QUANTITY = 2_147_483_647


def _round_price(price: Decimal | None) -> Decimal | None:
    if price is None:
        return None
    return price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


def _blank_to_none(description: str | None) -> str | None:
    return description or None


def _reject_bool(value):
    # JSON true/false would otherwise coerce to 1/0
    if isinstance(value, bool):
        raise ValueError("Input should be a valid integer")
    return value


class ProductCreate(BaseModel):
    """Schema for product creation request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: Decimal = Field(..., ge=0, le=MAX_PRICE)
    quantity: int = Field(..., ge=0, le=MAX_QUANTITY)

    @field_validator("price")
    @classmethod
    def round_price(cls, price: Decimal | None) -> Decimal | None:
        return _round_price(price)

    @field_validator("description")
    @classmethod
    def blank_description_to_none(cls, description: str | None) -> str | None:
        return _blank_to_none(description)

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_not_bool(cls, quantity):
        return _reject_bool(quantity)


class ProductUpdate(BaseModel):
    """Schema for a partial product update.

    Every field is optional. A field that is sent must pass the same rule as
    on create; sending null for a required column is rejected.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(None, ge=0, le=MAX_PRICE)
    quantity: int | None = Field(None, ge=0, le=MAX_QUANTITY)

    @field_validator("price")
    @classmethod
    def round_price(cls, price: Decimal | None) -> Decimal | None:
        return _round_price(price)

    @field_validator("description")
    @classmethod
    def blank_description_to_none(cls, description: str | None) -> str | None:
        return _blank_to_none(description)

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_not_bool(cls, quantity):
        return _reject_bool(quantity)

    @field_validator("name", "price", "quantity")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("This field may not be null")
        return value

    def changes(self) -> dict:
        """Return only the fields present in the payload."""
        return self.model_dump(exclude_unset=True)


class ProductResponse(BaseModel):
    """Schema for product response."""

    id: int
    name: str
    description: str | None
    price: Decimal
    quantity: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)

    @field_serializer("created_at", "updated_at", when_used="json")
    def serialize_timestamp(self, value: datetime) -> str:
        # SQLite hands back naive values; they are stored as UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()
