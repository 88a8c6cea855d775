# app/modules/inbound/router.py
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from .service import InboundOrderService
from .schemas import InboundOrderCreate, ItemBatchRequest, ItemBatchResponse, InboundOrderResponse

router = APIRouter(prefix="/inboundorder", tags=["Inbound - Órdenes de entrada"])


@router.post("", response_model=List[ItemBatchResponse], status_code=status.HTTP_201_CREATED)
async def create_inbound_order(
    order_data: InboundOrderCreate,
    db: Session = Depends(get_db)
):
    """
    Registrar ingreso de lotes a una sección
    
    **Validaciones:**
    - El operador pertenece al almacén
    - La sección pertenece al almacén
    - Los productos son de la misma categoría que la sección
    - El volumen total cabe en la capacidad disponible de la sección
    - Los vendedores de los productos están activos
    
    Si alguna validación falla no se almacena ningún lote.
    """
    service = InboundOrderService(db)
    return service.create_inbound_order(order_data)


@router.get("/{inbound_order_id}", response_model=InboundOrderResponse)
async def get_inbound_order(
    inbound_order_id: int,
    db: Session = Depends(get_db)
):
    service = InboundOrderService(db)
    return service.get_inbound_order(inbound_order_id)


@router.put("/{inbound_order_id}/item-batch", response_model=List[ItemBatchResponse], status_code=status.HTTP_201_CREATED)
async def update_item_batches(
    inbound_order_id: int,
    item_batches: List[ItemBatchRequest] = Body(..., min_length=1),
    db: Session = Depends(get_db)
):
    """
    Reemplazar los lotes de una orden de entrada
    
    Los lotes omitidos en el payload se eliminan. Se revalidan categoría y
    capacidad contra la sección de la orden.
    """
    service = InboundOrderService(db)
    return service.update_item_batches(inbound_order_id, item_batches)
