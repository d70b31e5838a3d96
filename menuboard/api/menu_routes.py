import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from menuboard.auth.routes import get_current_user
from menuboard.core.constants import MENU_CREATED, MENU_DELETED, MENU_UPDATED
from menuboard.core.errors import (
    CategoryNotFoundError,
    MenuNotFoundError,
    NotMenuAuthorError,
    OwnerOnlyError,
)
from menuboard.crud import menu as menu_crud
from menuboard.db import get_db
from menuboard.models.menu import Menu
from menuboard.models.user import User
from menuboard.schemas.menu import (
    MenuCreate,
    MenuDetail,
    MenuDetailResponse,
    MenuListResponse,
    MenuSummary,
    MenuUpdate,
    MessageResponse,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/categories/{category_id}/menus", tags=["menus"])

CategoryId = Annotated[int, Path(gt=0)]
MenuId = Annotated[int, Path(gt=0)]


def _require_owner(user: User) -> None:
    if not user.is_owner:
        raise OwnerOnlyError()


def _require_author(menu: Menu, user: User) -> None:
    if menu.user_id != user.id:
        raise NotMenuAuthorError()


async def _load_editable_menu(db: AsyncSession, category_id: int, menu_id: int, user: User) -> Menu:
    """Category and menu must be active and the caller must be the menu's creator."""
    category = await menu_crud.get_active_category(db, category_id, lock=True)
    if not category:
        raise CategoryNotFoundError()

    menu = await menu_crud.get_active_menu(db, category_id, menu_id)
    if not menu:
        raise MenuNotFoundError()

    _require_author(menu, user)
    return menu


# ----- Create Menu
@router.post("", response_model=MessageResponse)
async def create_menu(
    payload: MenuCreate,
    category_id: CategoryId,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    _require_owner(user)

    category = await menu_crud.get_active_category(db, category_id)
    if not category:
        raise CategoryNotFoundError(body_key="message")

    next_order = await menu_crud.get_next_order(db)

    # Nickname at creation time becomes the author
    author = (await menu_crud.get_user(db, user.id)).nickname

    menu = await menu_crud.create_menu(db, category_id, user.id, author, next_order, payload)
    await db.commit()

    log.info("create_menu: category=%s menu=%s user=%s order=%s", category_id, menu.id, user.id, next_order)
    return {"message": MENU_CREATED}


# ----- List Menus of a Category
@router.get("", response_model=MenuListResponse)
async def list_menus(
    category_id: CategoryId,
    db: AsyncSession = Depends(get_db),
):
    category = await menu_crud.get_active_category(db, category_id)
    if not category:
        raise CategoryNotFoundError()

    menus = await menu_crud.get_menus_by_category(db, category_id)
    return {"data": [MenuSummary.model_validate(m) for m in menus]}


# ----- Menu Detail
@router.get("/{menu_id}", response_model=MenuDetailResponse)
async def get_menu(
    category_id: CategoryId,
    menu_id: MenuId,
    db: AsyncSession = Depends(get_db),
):
    category = await menu_crud.get_active_category(db, category_id)
    if not category:
        raise CategoryNotFoundError()

    menu = await menu_crud.get_active_menu(db, category_id, menu_id)
    if not menu:
        raise MenuNotFoundError()

    return {"data": MenuDetail.model_validate(menu)}


# ----- Update Menu (with reordering)
@router.patch("/{menu_id}", response_model=MessageResponse)
async def update_menu(
    payload: MenuUpdate,
    category_id: CategoryId,
    menu_id: MenuId,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    _require_owner(user)
    menu = await _load_editable_menu(db, category_id, menu_id, user)

    # Lookup, shift and overwrite share one transaction
    holder = await menu_crud.find_menu_holding_order(db, payload.order)
    if holder:
        shifted = await menu_crud.shift_orders_from(db, category_id, payload.order)
        log.info("update_menu: order %s taken, shifted %s menus in category=%s", payload.order, shifted, category_id)

    menu_crud.apply_menu_update(menu, payload)
    await db.commit()

    log.info("update_menu: category=%s menu=%s user=%s order=%s", category_id, menu_id, user.id, payload.order)
    return {"message": MENU_UPDATED}


# ----- Delete Menu (soft)
@router.delete("/{menu_id}", response_model=MessageResponse)
async def delete_menu(
    category_id: CategoryId,
    menu_id: MenuId,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    _require_owner(user)
    menu = await _load_editable_menu(db, category_id, menu_id, user)

    menu_crud.soft_delete_menu(menu)
    await db.commit()

    log.info("delete_menu: category=%s menu=%s user=%s", category_id, menu_id, user.id)
    return {"message": MENU_DELETED}
