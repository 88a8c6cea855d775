# tests/unit/test_lot_selection.py
from datetime import date, timedelta

from app.modules.outbound.repository import OutboundRepository
from app.modules.outbound.service import OutboundOrderService
from tests.factories import make_lot, make_product, make_section, make_warehouse


def _min_due_date():
    return date.today() + timedelta(days=21)


def test_picks_earliest_due_date_among_eligible(db):
    section = make_section(db)
    product = make_product(db)
    make_lot(db, section, product, quantity=10, due_in_days=90)
    soonest = make_lot(db, section, product, quantity=10, due_in_days=30)
    make_lot(db, section, product, quantity=10, due_in_days=45)

    lot = OutboundRepository(db).find_lot(product.id, 5, _min_due_date())

    assert lot.id == soonest.id


def test_never_returns_lot_within_shelf_life_window(db):
    section = make_section(db)
    product = make_product(db)
    make_lot(db, section, product, quantity=50, due_in_days=10)
    # exactamente 21 días no alcanza: debe ser estrictamente mayor
    make_lot(db, section, product, quantity=50, due_in_days=21)
    eligible = make_lot(db, section, product, quantity=50, due_in_days=22)

    lot = OutboundRepository(db).find_lot(product.id, 5, _min_due_date())

    assert lot.id == eligible.id


def test_skips_lots_without_enough_quantity(db):
    section = make_section(db)
    product = make_product(db)
    make_lot(db, section, product, quantity=3, due_in_days=30)
    bigger = make_lot(db, section, product, quantity=8, due_in_days=60)

    lot = OutboundRepository(db).find_lot(product.id, 8, _min_due_date())

    assert lot.id == bigger.id


def test_no_match_even_if_lots_add_up(db):
    section = make_section(db)
    product = make_product(db)
    make_lot(db, section, product, quantity=6, due_in_days=30)
    make_lot(db, section, product, quantity=6, due_in_days=40)

    assert OutboundRepository(db).find_lot(product.id, 10, _min_due_date()) is None


def test_no_match_for_other_product(db):
    section = make_section(db)
    product = make_product(db)
    other = make_product(db)
    make_lot(db, section, other, quantity=100, due_in_days=60)

    assert OutboundRepository(db).find_lot(product.id, 1, _min_due_date()) is None


def test_restricted_to_warehouse(db):
    product = make_product(db)
    section_a = make_section(db)
    section_b = make_section(db, make_warehouse(db))
    make_lot(db, section_a, product, quantity=10, due_in_days=30)
    in_b = make_lot(db, section_b, product, quantity=10, due_in_days=60)

    lot = OutboundRepository(db).find_lot(
        product.id, 5, _min_due_date(), warehouse_id=section_b.warehouse_id
    )

    assert lot.id == in_b.id


def test_min_due_date_uses_shelf_life_setting(db):
    service = OutboundOrderService(db)
    assert service.min_due_date(date(2024, 1, 1)) == date(2024, 1, 22)
