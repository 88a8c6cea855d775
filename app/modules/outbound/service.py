# app/modules/outbound/service.py
import logging
from datetime import date, timedelta
from typing import List, Optional, Tuple
from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.core.exceptions import NotFoundException, BusinessRuleException
from app.modules.catalog.repository import CatalogRepository
from app.modules.inbound import rules
from app.modules.inbound.schemas import ItemBatchResponse
from app.modules.warehouse.repository import WarehouseRepository
from app.shared.database.models import ItemBatch, OutboundOrder
from .repository import OutboundRepository
from .schemas import OutboundOrderCreate, OutboundItemRequest, OutboundItemBatchResponse, OutboundOrderResponse

logger = logging.getLogger(__name__)


class OutboundOrderService:
    """
    Servicio de órdenes de salida.
    
    Cada línea se atiende con un único lote: el de vencimiento más próximo
    que todavía supera la vida útil mínima y tiene la cantidad completa.
    """
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = OutboundRepository(db)
        self.warehouse_repository = WarehouseRepository(db)
        self.catalog_repository = CatalogRepository(db)
    
    def min_due_date(self, today: Optional[date] = None) -> date:
        return (today or date.today()) + timedelta(days=settings.min_shelf_life_days)
    
    def find_lot(
        self,
        product_id: int,
        quantity: int,
        warehouse_id: Optional[int] = None
    ) -> ItemBatchResponse:
        """Lote que se elegiría para retirar la cantidad pedida del producto"""
        self._find_product(product_id)
        
        lot = self.repository.find_lot(product_id, quantity, self.min_due_date(), warehouse_id)
        if not lot:
            raise NotFoundException("No hay lote disponible con vencimiento y cantidad suficientes.")
        return ItemBatchResponse.model_validate(lot)
    
    def create_outbound_order(self, order_data: OutboundOrderCreate) -> List[OutboundItemBatchResponse]:
        """
        Retirar del almacén las cantidades pedidas.
        
        Si alguna línea no tiene lote elegible no se descuenta nada.
        """
        warehouse = self.warehouse_repository.get_warehouse_by_id(order_data.warehouse_id)
        if not warehouse:
            raise NotFoundException("Almacén no encontrado.")
        
        operator = self.warehouse_repository.get_operator_by_id(order_data.warehouse_operator_id)
        if not operator:
            raise NotFoundException("Operador no encontrado.")
        
        for item in order_data.items:
            self._find_product(item.product_id)
        
        if not rules.operator_belongs_to_warehouse(warehouse, operator):
            self._reject("Este operador no forma parte del almacén.")
        
        try:
            picks = self._pick_lots(order_data.items, warehouse.id)
        except HTTPException:
            self.repository.rollback()
            raise
        
        outbound_order = self.repository.create_outbound_order(
            {
                "order_date": date.today(),
                "warehouse_id": warehouse.id,
                "warehouse_operator_id": operator.id
            },
            picks
        )
        logger.info(f"Orden de salida {outbound_order.id} creada con {len(picks)} retiros")
        
        return [self._build_pick_response(pick) for pick in outbound_order.item_batches]
    
    def update_outbound_item_batches(
        self,
        outbound_order_id: int,
        items: List[OutboundItemRequest]
    ) -> List[OutboundItemBatchResponse]:
        """
        Reemplazar los retiros de una orden de salida.
        
        Las cantidades retiradas antes vuelven a sus lotes y la selección se
        hace de nuevo para las líneas recibidas.
        """
        outbound_order = self.repository.get_outbound_order_by_id(outbound_order_id)
        if not outbound_order:
            raise NotFoundException("Orden de salida no encontrada.")
        
        for item in items:
            self._find_product(item.product_id)
        
        try:
            self.repository.restore_picks(outbound_order)
            picks = self._pick_lots(items, outbound_order.warehouse_id)
        except HTTPException:
            self.repository.rollback()
            raise
        
        outbound_order = self.repository.replace_picks(outbound_order, picks)
        logger.info(f"Retiros de la orden de salida {outbound_order_id} reemplazados ({len(picks)} retiros)")
        
        return [self._build_pick_response(pick) for pick in outbound_order.item_batches]
    
    def get_outbound_order(self, outbound_order_id: int) -> OutboundOrderResponse:
        outbound_order = self.repository.get_outbound_order_by_id(outbound_order_id)
        if not outbound_order:
            raise NotFoundException("Orden de salida no encontrada.")
        return self._build_order_response(outbound_order)
    
    # ==================== HELPERS ====================
    
    def _pick_lots(self, items: List[OutboundItemRequest], warehouse_id: int) -> List[Tuple[ItemBatch, int]]:
        """Elegir y descontar un lote por línea; las líneas siguientes ven el descuento"""
        min_due_date = self.min_due_date()
        picks = []
        for item in items:
            lot = self.repository.find_lot(
                item.product_id, item.quantity, min_due_date,
                warehouse_id=warehouse_id, for_update=True
            )
            if not lot:
                self._reject(
                    f"No hay lote del producto {item.product_id} con {item.quantity} unidades "
                    f"y más de {settings.min_shelf_life_days} días de vida útil."
                )
            self.repository.deduct(lot, item.quantity)
            picks.append((lot, item.quantity))
        return picks
    
    def _find_product(self, product_id: int):
        product = self.catalog_repository.get_product_by_id(product_id)
        if not product:
            raise NotFoundException("Producto no encontrado.")
        return product
    
    def _reject(self, message: str):
        logger.warning(f"Orden de salida rechazada: {message}")
        raise BusinessRuleException(message)
    
    def _build_pick_response(self, pick) -> OutboundItemBatchResponse:
        return OutboundItemBatchResponse(
            id=pick.id,
            outbound_order_id=pick.outbound_order_id,
            item_batch_id=pick.item_batch_id,
            product_id=pick.product_id,
            quantity=pick.quantity,
            due_date=pick.item_batch.due_date,
            remaining_quantity=pick.item_batch.product_quantity
        )
    
    def _build_order_response(self, outbound_order: OutboundOrder) -> OutboundOrderResponse:
        return OutboundOrderResponse(
            id=outbound_order.id,
            order_date=outbound_order.order_date,
            warehouse_id=outbound_order.warehouse_id,
            warehouse_operator_id=outbound_order.warehouse_operator_id,
            item_batches=[self._build_pick_response(pick) for pick in outbound_order.item_batches]
        )
