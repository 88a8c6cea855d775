# tests/factories.py
import uuid
from datetime import date, timedelta
from decimal import Decimal

from app.shared.database.models import (
    InboundOrder,
    ItemBatch,
    Product,
    Section,
    Seller,
    StorageCategory,
    Warehouse,
    WarehouseOperator,
)


def days_from_today(days: int) -> date:
    return date.today() + timedelta(days=days)


def _save(db, obj):
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def make_seller(db, active: bool = True) -> Seller:
    return _save(
        db,
        Seller(
            first_name="Ana",
            last_name="Souza",
            email=f"{uuid.uuid4().hex[:10]}@mercado.com",
            address="Rua Central",
            house_number=100,
            zip_code="01310100",
            active=active,
        ),
    )


def make_product(db, seller: Seller = None, category: StorageCategory = StorageCategory.FRESCO) -> Product:
    seller = seller or make_seller(db)
    return _save(
        db,
        Product(name="Queso", price=Decimal("12.50"), category=category, seller_id=seller.id),
    )


def make_operator(db) -> WarehouseOperator:
    return _save(db, WarehouseOperator(first_name="Joao", last_name="Lima"))


def make_warehouse(db, operator: WarehouseOperator = None) -> Warehouse:
    operator = operator or make_operator(db)
    return _save(db, Warehouse(name="Centro", warehouse_operator_id=operator.id))


def make_section(
    db,
    warehouse: Warehouse = None,
    category: StorageCategory = StorageCategory.FRESCO,
    volume: int = 100,
) -> Section:
    warehouse = warehouse or make_warehouse(db)
    return _save(db, Section(warehouse_id=warehouse.id, category=category, volume=volume))


def make_lot(
    db,
    section: Section,
    product: Product,
    quantity: int = 10,
    due_in_days: int = 60,
    volume: int = 10,
) -> ItemBatch:
    """Crea una orden de entrada con un único lote, sin pasar por las reglas"""
    warehouse = db.get(Warehouse, section.warehouse_id)
    order = InboundOrder(
        order_date=date.today(),
        warehouse_id=warehouse.id,
        section_id=section.id,
        warehouse_operator_id=warehouse.warehouse_operator_id,
        item_batches=[
            ItemBatch(
                product_id=product.id,
                product_quantity=quantity,
                volume=volume,
                due_date=days_from_today(due_in_days),
            )
        ],
    )
    _save(db, order)
    return order.item_batches[0]


def batch_payload(product_id: int, volume: int = 10, quantity: int = 5, due_in_days: int = 60) -> dict:
    return {
        "product_id": product_id,
        "product_quantity": quantity,
        "volume": volume,
        "due_date": days_from_today(due_in_days).isoformat(),
    }
