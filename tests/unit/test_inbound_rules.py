from app.modules.inbound import rules
from app.shared.database.models import (
    Product,
    Section,
    Seller,
    StorageCategory,
    Warehouse,
    WarehouseOperator,
)


def _section(volume=100, category=StorageCategory.SECO, warehouse_id=1):
    return Section(id=7, warehouse_id=warehouse_id, category=category, volume=volume)


def test_operator_belongs_to_warehouse():
    warehouse = Warehouse(id=1, warehouse_operator_id=3)
    assert rules.operator_belongs_to_warehouse(warehouse, WarehouseOperator(id=3)) is True
    assert rules.operator_belongs_to_warehouse(warehouse, WarehouseOperator(id=4)) is False


def test_section_belongs_to_warehouse():
    assert rules.section_belongs_to_warehouse(_section(warehouse_id=1), Warehouse(id=1)) is True
    assert rules.section_belongs_to_warehouse(_section(warehouse_id=2), Warehouse(id=1)) is False


def test_categories_match_section_requires_every_product():
    section = _section(category=StorageCategory.SECO)
    seco = Product(category=StorageCategory.SECO)
    fresco = Product(category=StorageCategory.FRESCO)

    assert rules.categories_match_section([seco, seco], section) is True
    assert rules.categories_match_section([seco, fresco], section) is False
    assert rules.categories_match_section([fresco], section) is False


def test_fits_in_section_examples():
    section = _section(volume=100)
    assert rules.fits_in_section(section, used_volume=0, volume_to_store=40 + 50) is True
    assert rules.fits_in_section(section, used_volume=0, volume_to_store=40 + 70) is False
    assert rules.fits_in_section(section, used_volume=0, volume_to_store=100) is True


def test_fits_in_section_counts_used_volume():
    section = _section(volume=100)
    assert rules.fits_in_section(section, used_volume=60, volume_to_store=40) is True
    assert rules.fits_in_section(section, used_volume=61, volume_to_store=40) is False


def test_sellers_active_fails_if_any_inactive():
    assert rules.sellers_active([Seller(active=True), Seller(active=True)]) is True
    assert rules.sellers_active([Seller(active=True), Seller(active=False)]) is False
