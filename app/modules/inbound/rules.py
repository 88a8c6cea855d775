# app/modules/inbound/rules.py
"""
Reglas de entrada de lotes.

Funciones puras sobre entidades ya resueltas; el servicio decide el orden
y el mensaje de error de cada una.
"""
from typing import Iterable

from app.shared.database.models import Warehouse, WarehouseOperator, Section, Product, Seller


def operator_belongs_to_warehouse(warehouse: Warehouse, operator: WarehouseOperator) -> bool:
    return warehouse.warehouse_operator_id == operator.id


def section_belongs_to_warehouse(section: Section, warehouse: Warehouse) -> bool:
    return section.warehouse_id == warehouse.id


def categories_match_section(products: Iterable[Product], section: Section) -> bool:
    """Todos los productos deben ser de la categoría de la sección"""
    return all(product.category == section.category for product in products)


def fits_in_section(section: Section, used_volume: int, volume_to_store: int) -> bool:
    return volume_to_store <= section.volume - used_volume


def sellers_active(sellers: Iterable[Seller]) -> bool:
    return all(seller.active for seller in sellers)
