"""Reset database to empty state.

Deletes every row from the products table. Ids keep counting from where
they were, since deleted ids are never reused.

Usage:
    python -m scripts.reset_db
"""

import asyncio

from sqlalchemy import text

from catalog.core.database import async_session_maker, engine


async def reset_database():
    """Clear all data from the database."""
    print("=" * 60)
    print("Resetting database to empty state...")
    print("=" * 60)

    async with async_session_maker() as session:
        result = await session.execute(text("DELETE FROM products"))
        print(f"  Deleted {result.rowcount} rows from products")

        await session.commit()
        print("\nDatabase cleared successfully!")


async def main():
    await reset_database()

    print("\n" + "=" * 60)
    print("Reset complete!")
    print("=" * 60)
    print("\nTo re-seed the database, run:")
    print("  python -m scripts.seed_data")
    print("=" * 60)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
