# app/modules/outbound/repository.py
from datetime import date
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import asc
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import ItemBatch, InboundOrder, OutboundOrder, OutboundItemBatch

class OutboundRepository:
    """
    Repositorio de órdenes de salida y selección de lotes
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    # ==================== SELECCIÓN DE LOTES ====================
    
    def find_lot(
        self,
        product_id: int,
        quantity: int,
        min_due_date: date,
        warehouse_id: Optional[int] = None,
        for_update: bool = False
    ) -> Optional[ItemBatch]:
        """
        Lote que vence antes entre los que vencen después de min_due_date
        y tienen al menos la cantidad pedida.
        
        Nunca combina lotes: si ninguno alcanza solo, no hay resultado.
        """
        query = self.db.query(ItemBatch).filter(
            ItemBatch.product_id == product_id,
            ItemBatch.due_date > min_due_date,
            ItemBatch.product_quantity >= quantity
        )
        
        if warehouse_id is not None:
            query = query.join(InboundOrder, ItemBatch.inbound_order_id == InboundOrder.id)\
                .filter(InboundOrder.warehouse_id == warehouse_id)
        
        if for_update:
            query = query.with_for_update()
        
        return query.order_by(asc(ItemBatch.due_date), asc(ItemBatch.id)).first()
    
    def deduct(self, lot: ItemBatch, quantity: int):
        """Descontar cantidad del lote (visible para las siguientes consultas de la transacción)"""
        lot.product_quantity -= quantity
        self.db.flush()
    
    def restore_picks(self, outbound_order: OutboundOrder):
        """Devolver a sus lotes las cantidades retiradas por la orden"""
        for pick in outbound_order.item_batches:
            pick.item_batch.product_quantity += pick.quantity
        self.db.flush()
    
    # ==================== ÓRDENES ====================
    
    def create_outbound_order(
        self,
        order_data: dict,
        picks: List[Tuple[ItemBatch, int]]
    ) -> OutboundOrder:
        """Crear orden con sus retiros en una sola transacción"""
        try:
            outbound_order = OutboundOrder(
                **order_data,
                item_batches=[self._build_pick(lot, quantity) for lot, quantity in picks]
            )
            self.db.add(outbound_order)
            self.db.commit()
            self.db.refresh(outbound_order)
            return outbound_order
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
    
    def replace_picks(
        self,
        outbound_order: OutboundOrder,
        picks: List[Tuple[ItemBatch, int]]
    ) -> OutboundOrder:
        try:
            outbound_order.item_batches = [self._build_pick(lot, quantity) for lot, quantity in picks]
            self.db.commit()
            self.db.refresh(outbound_order)
            return outbound_order
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
    
    def get_outbound_order_by_id(self, outbound_order_id: int) -> Optional[OutboundOrder]:
        return self.db.query(OutboundOrder).options(
            joinedload(OutboundOrder.item_batches).joinedload(OutboundItemBatch.item_batch)
        ).filter(OutboundOrder.id == outbound_order_id).first()
    
    def rollback(self):
        self.db.rollback()
    
    def _build_pick(self, lot: ItemBatch, quantity: int) -> OutboundItemBatch:
        return OutboundItemBatch(
            item_batch=lot,
            product_id=lot.product_id,
            quantity=quantity
        )
