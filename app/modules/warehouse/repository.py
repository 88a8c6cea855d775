# app/modules/warehouse/repository.py
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Warehouse, WarehouseOperator, Section, InboundOrder, ItemBatch

class WarehouseRepository:
    """
    Repositorio de almacenes, secciones y operadores
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    def _save(self, entity):
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
    
    # ==================== OPERADORES ====================
    
    def create_operator(self, operator_data: dict) -> WarehouseOperator:
        return self._save(WarehouseOperator(**operator_data))
    
    def get_operator_by_id(self, operator_id: int) -> Optional[WarehouseOperator]:
        return self.db.query(WarehouseOperator).filter(WarehouseOperator.id == operator_id).first()
    
    # ==================== ALMACENES ====================
    
    def create_warehouse(self, warehouse_data: dict) -> Warehouse:
        return self._save(Warehouse(**warehouse_data))
    
    def get_warehouse_by_id(self, warehouse_id: int) -> Optional[Warehouse]:
        return self.db.query(Warehouse).filter(Warehouse.id == warehouse_id).first()
    
    # ==================== SECCIONES ====================
    
    def create_section(self, section_data: dict) -> Section:
        return self._save(Section(**section_data))
    
    def get_section_by_id(self, section_id: int, for_update: bool = False) -> Optional[Section]:
        """
        Obtener sección por ID.
        
        for_update bloquea la fila hasta el commit, así dos órdenes
        concurrentes no validan capacidad contra el mismo total.
        """
        query = self.db.query(Section).filter(Section.id == section_id)
        if for_update:
            query = query.with_for_update()
        return query.first()
    
    def get_used_volume(self, section_id: int, exclude_inbound_order_id: Optional[int] = None) -> int:
        """Volumen ocupado por los lotes almacenados en la sección"""
        query = self.db.query(func.coalesce(func.sum(ItemBatch.volume), 0))\
            .select_from(ItemBatch)\
            .join(InboundOrder, ItemBatch.inbound_order_id == InboundOrder.id)\
            .filter(InboundOrder.section_id == section_id)
        
        if exclude_inbound_order_id is not None:
            query = query.filter(InboundOrder.id != exclude_inbound_order_id)
        
        return int(query.scalar())
