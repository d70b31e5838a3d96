from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from menuboard.core.constants import UserRole
from menuboard.models.user import User


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def set_user_role(db: AsyncSession, email: str, role: UserRole) -> Optional[User]:
    """Change a registered user's role; returns None when no user has that email"""
    user = await get_user_by_email(db, email)
    if not user:
        return None
    user.role = role.value
    await db.commit()
    return user
