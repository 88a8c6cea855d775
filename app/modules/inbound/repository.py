# app/modules/inbound/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import InboundOrder, ItemBatch, OutboundItemBatch

class InboundRepository:
    """
    Repositorio de órdenes de entrada y sus lotes
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    def create_inbound_order(self, order_data: dict, batches_data: List[dict]) -> InboundOrder:
        """Crear orden y lotes en una sola transacción"""
        try:
            inbound_order = InboundOrder(
                **order_data,
                item_batches=[ItemBatch(**batch) for batch in batches_data]
            )
            self.db.add(inbound_order)
            self.db.commit()
            self.db.refresh(inbound_order)
            return inbound_order
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
    
    def get_inbound_order_by_id(self, inbound_order_id: int) -> Optional[InboundOrder]:
        return self.db.query(InboundOrder).options(
            joinedload(InboundOrder.section),
            joinedload(InboundOrder.item_batches)
        ).filter(InboundOrder.id == inbound_order_id).first()
    
    def replace_item_batches(self, inbound_order: InboundOrder, batches_data: List[dict]) -> InboundOrder:
        """Reemplazar la lista completa de lotes (los omitidos se eliminan)"""
        try:
            inbound_order.item_batches = [ItemBatch(**batch) for batch in batches_data]
            self.db.commit()
            self.db.refresh(inbound_order)
            return inbound_order
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
    
    def has_outbound_picks(self, inbound_order_id: int) -> bool:
        """Si algún lote de la orden ya fue retirado por una orden de salida"""
        return self.db.query(OutboundItemBatch.id)\
            .join(ItemBatch, OutboundItemBatch.item_batch_id == ItemBatch.id)\
            .filter(ItemBatch.inbound_order_id == inbound_order_id)\
            .first() is not None
