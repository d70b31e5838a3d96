from sqlalchemy.future import select

from menuboard.core.constants import FIRST_MENU_ORDER
from menuboard.crud import menu as menu_crud
from menuboard.models.menu import Menu


def test_next_order_on_empty_table(db_run):
    assert db_run(menu_crud.get_next_order) == FIRST_MENU_ORDER


def test_next_order_spans_categories_and_deleted_rows(db_run, make_user, make_category, make_menu):
    owner = make_user()
    a = make_category(name="A")
    b = make_category(name="B")
    make_menu(a, owner, order=4)
    make_menu(b, owner, order=9, deleted=True)

    assert db_run(menu_crud.get_next_order) == 10


def test_active_menu_clause_hides_menus_of_deleted_category(db_run, make_user, make_category, make_menu):
    owner = make_user()
    live = make_category(name="Live")
    dead = make_category(name="Dead", deleted=True)
    kept = make_menu(live, owner, order=1)
    make_menu(live, owner, order=2, deleted=True)
    make_menu(dead, owner, order=3)

    async def _active_ids(session):
        result = await session.execute(select(Menu.id).where(menu_crud.active_menu_clause()))
        return [row[0] for row in result.all()]

    assert db_run(_active_ids) == [kept]


def test_get_active_category_skips_deleted(db_run, make_category):
    live = make_category(name="Live")
    dead = make_category(name="Dead", deleted=True)

    async def _lookup(session):
        found = await menu_crud.get_active_category(session, live, lock=True)
        missing = await menu_crud.get_active_category(session, dead)
        return found, missing

    found, missing = db_run(_lookup)
    assert found.id == live
    assert missing is None


def test_find_menu_holding_order_ignores_deleted(db_run, make_user, make_category, make_menu):
    owner = make_user()
    category = make_category()
    make_menu(category, owner, order=2, deleted=True)

    async def _holder(session):
        return await menu_crud.find_menu_holding_order(session, 2)

    assert db_run(_holder) is None


def test_shift_orders_from_is_scoped_and_inclusive(db_run, make_user, make_category, make_menu, fetch_menu):
    owner = make_user()
    category = make_category()
    other = make_category(name="Other")
    below = make_menu(category, owner, order=1)
    at = make_menu(category, owner, order=2)
    above = make_menu(category, owner, order=5)
    deleted = make_menu(category, owner, order=6, deleted=True)
    elsewhere = make_menu(other, owner, order=2)

    async def _shift(session):
        await menu_crud.shift_orders_from(session, category, 2)
        await session.commit()

    db_run(_shift)

    assert fetch_menu(below).order == 1
    assert fetch_menu(at).order == 3
    assert fetch_menu(above).order == 6
    assert fetch_menu(deleted).order == 6
    assert fetch_menu(elsewhere).order == 2


def test_uncommitted_shift_rolls_back(db_run, make_user, make_category, make_menu, fetch_menu):
    owner = make_user()
    category = make_category()
    menu = make_menu(category, owner, order=1)

    async def _shift_then_abandon(session):
        await menu_crud.shift_orders_from(session, category, 1)
        await session.rollback()

    db_run(_shift_then_abandon)

    assert fetch_menu(menu).order == 1
