"""Seed data script for development and demos.

Creates a handful of sample products so both frontends have something to
show. Products are only inserted when the table is empty.

Environment Variables:
    RESET_DATA: Set to "true" to delete existing products first (default: false)
    CREATE_TABLES: Set to "true" to create missing tables first (default: false)

Usage:
    # Seed an empty database
    python -m scripts.seed_data

    # Start over with the sample set (SQLite dev database)
    DATABASE_URL=sqlite+aiosqlite:///./catalog.db CREATE_TABLES=true RESET_DATA=true \
        python -m scripts.seed_data
"""

import asyncio
import os
from decimal import Decimal

# Configuration from environment variables
RESET_DATA = os.getenv("RESET_DATA", "false").lower() == "true"
CREATE_TABLES = os.getenv("CREATE_TABLES", "false").lower() == "true"

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.database import async_session_maker, create_tables, engine
from catalog.models import Product

SAMPLE_PRODUCTS = [
    {
        "name": "Laptop",
        "description": "14-inch ultrabook, 16 GB RAM",
        "price": Decimal("1299.99"),
        "quantity": 5,
    },
    {
        "name": "Mechanical Keyboard",
        "description": "Hot-swappable switches",
        "price": Decimal("89.50"),
        "quantity": 40,
    },
    {
        "name": "USB-C Hub",
        "description": None,
        "price": Decimal("24.00"),
        "quantity": 120,
    },
    {
        "name": "Monitor Arm",
        "description": "Fits 17-32 inch screens",
        "price": Decimal("59.90"),
        "quantity": 0,
    },
]


async def reset_products(session: AsyncSession) -> None:
    """Delete every product."""
    print("Resetting products...")
    result = await session.execute(delete(Product))
    await session.commit()
    print(f"  Deleted {result.rowcount} products")


async def seed_products(session: AsyncSession) -> list[Product]:
    """Insert the sample products unless products already exist."""
    print("Seeding products...")

    result = await session.execute(select(Product).limit(1))
    if result.scalar_one_or_none():
        print("  Products already exist, skipping...")
        result = await session.execute(select(Product).order_by(Product.id))
        return list(result.scalars().all())

    products = [Product(**data) for data in SAMPLE_PRODUCTS]
    session.add_all(products)
    await session.commit()

    for product in products:
        await session.refresh(product)
        print(f"  Created product {product.id}: {product.name} ({product.price})")

    return products


async def main():
    print("=" * 60)
    print("Seeding database...")
    print("=" * 60)

    if CREATE_TABLES:
        await create_tables()

    async with async_session_maker() as session:
        if RESET_DATA:
            await reset_products(session)
        products = await seed_products(session)

    print("\n" + "=" * 60)
    print(f"Done! {len(products)} products available.")
    print("=" * 60)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
