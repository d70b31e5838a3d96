from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import and_, func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from menuboard.core.constants import FIRST_MENU_ORDER, MenuStatus
from menuboard.models.category import Category
from menuboard.models.menu import Menu
from menuboard.models.user import User
from menuboard.schemas.menu import MenuCreate, MenuUpdate


def active_category_clause(category_id: int):
    return and_(Category.id == category_id, Category.deleted_at.is_(None))


def active_menu_clause(category_id: Optional[int] = None):
    """Menu not soft-deleted and its category not soft-deleted, optionally scoped to one category."""
    clause = and_(
        Menu.deleted_at.is_(None),
        Menu.category.has(Category.deleted_at.is_(None)),
    )
    if category_id is not None:
        clause = and_(clause, Menu.category_id == category_id)
    return clause


async def get_active_category(db: AsyncSession, category_id: int, lock: bool = False) -> Optional[Category]:
    query = select(Category).where(active_category_clause(category_id))
    if lock:
        # Serializes concurrent reorders within one category where row locks exist
        query = query.with_for_update()
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_next_order(db: AsyncSession) -> int:
    """Next rank across every menu in every category, deleted rows included."""
    result = await db.execute(select(func.max(Menu.order)))
    max_order = result.scalar()
    return max_order + 1 if max_order is not None else FIRST_MENU_ORDER


async def create_menu(
    db: AsyncSession,
    category_id: int,
    user_id: int,
    author: str,
    order: int,
    payload: MenuCreate,
) -> Menu:
    menu = Menu(
        category_id=category_id,
        user_id=user_id,
        name=payload.name,
        description=payload.description,
        image=str(payload.image),
        price=payload.price,
        order=order,
        status=MenuStatus.FOR_SALE.value,
        author=author,
    )
    db.add(menu)
    await db.flush()
    return menu


async def get_menus_by_category(db: AsyncSession, category_id: int) -> List[Menu]:
    result = await db.execute(
        select(Menu)
        .where(active_menu_clause(category_id))
        .order_by(Menu.order.asc(), Menu.id.asc())
    )
    return result.scalars().all()


async def get_active_menu(db: AsyncSession, category_id: int, menu_id: int) -> Optional[Menu]:
    result = await db.execute(
        select(Menu).where(Menu.id == menu_id, active_menu_clause(category_id))
    )
    return result.scalar_one_or_none()


async def find_menu_holding_order(db: AsyncSession, order: int) -> Optional[Menu]:
    """Any active menu, in any category, that currently holds ``order``."""
    result = await db.execute(
        select(Menu).where(Menu.order == order, Menu.deleted_at.is_(None)).limit(1)
    )
    return result.scalars().first()


async def shift_orders_from(db: AsyncSession, category_id: int, order: int) -> int:
    """Bump every active menu of the category ranked at or after ``order`` by one."""
    result = await db.execute(
        update(Menu)
        .where(
            Menu.category_id == category_id,
            Menu.deleted_at.is_(None),
            Menu.order >= order,
        )
        .values(order=Menu.order + 1)
        .execution_options(synchronize_session="fetch")
    )
    return result.rowcount


def apply_menu_update(menu: Menu, payload: MenuUpdate) -> Menu:
    menu.name = payload.name
    menu.description = payload.description
    menu.price = payload.price
    menu.order = payload.order
    if payload.status is not None:
        menu.status = payload.status.value
    return menu


def soft_delete_menu(menu: Menu) -> Menu:
    menu.deleted_at = datetime.now(timezone.utc)
    return menu
