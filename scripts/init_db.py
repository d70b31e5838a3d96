# scripts/init_db.py
import asyncio

from menuboard.db import create_db_and_tables, engine


async def create_tables():
    await create_db_and_tables()
    await engine.dispose()
    print("All missing tables created.")


if __name__ == "__main__":
    asyncio.run(create_tables())
