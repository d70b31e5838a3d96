# scripts/seed_categories.py

import argparse
import asyncio

from sqlalchemy.future import select

from menuboard.db import async_session, create_db_and_tables, engine
from menuboard.models.category import Category

CATEGORIES_TO_SEED = [
    {"name": "Main Dishes", "order": 1},
    {"name": "Side Dishes", "order": 2},
    {"name": "Drinks", "order": 3},
]


async def seed_categories(names=None):
    await create_db_and_tables()

    seed = CATEGORIES_TO_SEED
    if names:
        seed = [{"name": name, "order": i + 1} for i, name in enumerate(names)]

    async with async_session() as session:
        for data in seed:
            result = await session.execute(
                select(Category).where(Category.name == data["name"], Category.deleted_at.is_(None))
            )
            if result.scalars().first():
                print(f"Category '{data['name']}' already exists. Skipping.")
                continue
            session.add(Category(name=data["name"], order=data["order"]))
            print(f"Created category: {data['name']}")

        await session.commit()

    await engine.dispose()
    print("Done seeding categories.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed menu categories")
    parser.add_argument("names", nargs="*", help="Category names (defaults to a starter set)")
    args = parser.parse_args()
    asyncio.run(seed_categories(args.names))
