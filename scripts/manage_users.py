# scripts/manage_users.py

import argparse
import asyncio

from menuboard.core.constants import UserRole
from menuboard.crud.user import set_user_role
from menuboard.db import async_session, engine


async def change_roles(emails, role):
    async with async_session() as session:
        for email in emails:
            user = await set_user_role(session, email, role)
            if not user:
                print(f"User '{email}' not found. Skipping.")
                continue
            print(f"{user.email} ({user.nickname}) is now {user.role}")

    await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Promote registered users to owners, or demote them")
    parser.add_argument("emails", nargs="+", help="Emails of registered users")
    parser.add_argument("--demote", action="store_true", help="Set the role back to CUSTOMER")
    args = parser.parse_args()
    asyncio.run(change_roles(args.emails, UserRole.CUSTOMER if args.demote else UserRole.OWNER))
