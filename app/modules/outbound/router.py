# app/modules/outbound/router.py
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.config.database import get_db
from app.modules.inbound.schemas import ItemBatchResponse
from .service import OutboundOrderService
from .schemas import OutboundOrderCreate, OutboundItemRequest, OutboundItemBatchResponse, OutboundOrderResponse

router = APIRouter(prefix="/outboundorder", tags=["Outbound - Órdenes de salida"])


@router.post("", response_model=List[OutboundItemBatchResponse], status_code=status.HTTP_201_CREATED)
async def create_outbound_order(
    order_data: OutboundOrderCreate,
    db: Session = Depends(get_db)
):
    """
    Registrar salida de productos
    
    **Selección de lote por línea:**
    - Vencimiento a más de 21 días
    - Cantidad disponible suficiente en un solo lote
    - Entre los elegibles, el de vencimiento más próximo
    """
    service = OutboundOrderService(db)
    return service.create_outbound_order(order_data)


@router.get("/lot", response_model=ItemBatchResponse)
async def find_lot(
    product_id: int = Query(..., gt=0),
    quantity: int = Query(..., gt=0),
    warehouse_id: Optional[int] = Query(None, gt=0),
    db: Session = Depends(get_db)
):
    """Consultar qué lote se usaría para retirar la cantidad, sin descontar"""
    service = OutboundOrderService(db)
    return service.find_lot(product_id, quantity, warehouse_id)


@router.get("/{outbound_order_id}", response_model=OutboundOrderResponse)
async def get_outbound_order(
    outbound_order_id: int,
    db: Session = Depends(get_db)
):
    service = OutboundOrderService(db)
    return service.get_outbound_order(outbound_order_id)


@router.put("/{outbound_order_id}/item-batch", response_model=List[OutboundItemBatchResponse], status_code=status.HTTP_201_CREATED)
async def update_outbound_item_batches(
    outbound_order_id: int,
    items: List[OutboundItemRequest] = Body(..., min_length=1),
    db: Session = Depends(get_db)
):
    """
    Reemplazar los retiros de una orden de salida
    
    Las cantidades anteriores vuelven a sus lotes antes de elegir de nuevo.
    """
    service = OutboundOrderService(db)
    return service.update_outbound_item_batches(outbound_order_id, items)
